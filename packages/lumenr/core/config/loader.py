"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from lumenr.core.config.models import AppConfig
from lumenr.core.utils import logging as log_utils

logger = logging.getLogger(__name__)

# Environment overrides: variable -> (section, field)
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "LUMENR_LOG_LEVEL": ("logging", "level"),
    "LUMENR_LANGUAGE": ("parsing", "language"),
}


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("config.json")
        'json'
        >>> detect_format("config.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return a raw configuration dictionary.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary (empty for an empty YAML file)

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                # safe_load returns None for empty files
                content = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping, got {type(content).__name__}")
    return content


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    Missing files yield the defaults. ``LUMENR_LOG_LEVEL`` and
    ``LUMENR_LANGUAGE`` override the file when set.

    Args:
        path: Path to app config file; defaults to AppConfig.default_path()

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If config is invalid
    """
    if path is None:
        path = AppConfig.default_path()

    if Path(path).exists():
        raw_config = load_config(path)
    else:
        logger.debug(f"No config file at {path}; using defaults")
        raw_config = {}

    _apply_env_overrides(raw_config)
    return AppConfig.model_validate(raw_config)


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    log_utils.configure_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def _apply_env_overrides(raw_config: dict[str, Any]) -> None:
    """Fill config values from environment variables.

    This mutates the raw dictionary before validation.
    """
    for env_var, (section, key) in _ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if not value:
            continue
        logger.debug(f"Loaded {section}.{key} from {env_var}")
        section_values = raw_config.setdefault(section, {})
        if isinstance(section_values, dict):
            section_values[key] = value.upper() if key == "level" else value.lower()


__all__ = [
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
]
