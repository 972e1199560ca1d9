"""Shared pytest fixtures for lumenr tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures import EN_TORCH_DESCRIPTION, RU_TORCH_DESCRIPTION, RecordingSink

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def missing_config(tmp_path: Path) -> Path:
    """Path to an app config that does not exist (defaults apply)."""
    return tmp_path / "absent.json"


# ============================================================================
# Description Fixtures
# ============================================================================


@pytest.fixture
def ru_torch_description() -> str:
    """Russian-grammar torch description."""
    return RU_TORCH_DESCRIPTION


@pytest.fixture
def en_torch_description() -> str:
    """English-grammar torch description."""
    return EN_TORCH_DESCRIPTION


# ============================================================================
# Host Fixtures
# ============================================================================


@pytest.fixture
def sink() -> RecordingSink:
    """Fresh recording token sink."""
    return RecordingSink()


@pytest.fixture(autouse=True)
def _clear_lumenr_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides from leaking into config tests."""
    monkeypatch.delenv("LUMENR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LUMENR_LANGUAGE", raising=False)
