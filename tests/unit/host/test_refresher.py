"""Tests for the entity light refresher."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from lumenr.core.host.refresher import EntityLightRefresher
from lumenr.core.light.models import NULL_PROFILE
from lumenr.core.utils.logging import configure_logging
from lumenr.core.vocabulary.grammar import ENGLISH_GRAMMAR
from tests.fixtures import FakeEntity, RecordingSink, make_item, ru_light


@pytest.fixture
def refresher(sink: RecordingSink) -> EntityLightRefresher:
    return EntityLightRefresher(sink)


class TestEffectiveProfile:
    """Tests for EntityLightRefresher.effective_profile()."""

    def test_only_equipped_items_count(self, refresher: EntityLightRefresher) -> None:
        entity = FakeEntity(
            name="Hero",
            items=[
                make_item(ru_light(60, "#ff0000"), equipped=False),
                make_item(ru_light(20, "#00ff00")),
            ],
        )

        profile = refresher.effective_profile(entity)

        assert profile.dim == 20
        assert profile.color == "#00ff00"

    def test_non_light_items_ignored(self, refresher: EntityLightRefresher) -> None:
        entity = FakeEntity(
            name="Hero",
            items=[make_item("<p>A plain sword</p>"), make_item(ru_light(30, "blue"))],
        )

        assert refresher.effective_profile(entity).color == "#0000ff"

    def test_no_light_is_null_profile(self, refresher: EntityLightRefresher) -> None:
        entity = FakeEntity(name="Hero", items=[make_item("<p>Rope</p>")])
        assert refresher.effective_profile(entity) is NULL_PROFILE

    def test_unreadable_item_does_not_hide_other_lights(
        self, refresher: EntityLightRefresher
    ) -> None:
        class UnloadedItem:
            name = "Ghost lamp"

            @property
            def system(self) -> object:
                raise RuntimeError("document not loaded")

        entity = FakeEntity(name="Hero", items=[UnloadedItem(), make_item(ru_light(25, "red"))])

        profile = refresher.effective_profile(entity)

        assert (profile.dim, profile.color) == (25, "#ff0000")

    def test_grammar_is_configurable(self, sink: RecordingSink) -> None:
        entity = FakeEntity(name="Hero", items=[make_item("<p>Source of light<br>Dim: 15</p>")])
        profile = EntityLightRefresher(sink, ENGLISH_GRAMMAR).effective_profile(entity)
        assert profile.dim == 15


class TestRefresh:
    """Tests for EntityLightRefresher.refresh()."""

    def test_pushes_to_every_token(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        entity = FakeEntity(
            name="Hero",
            items=[make_item(ru_light(40, "#ff8800", "факел"))],
            tokens=["t1", "t2"],
        )

        profile = refresher.refresh(entity)

        assert profile is not None
        assert [token for token, _ in sink.updates] == ["t1", "t2"]
        for _, data in sink.updates:
            assert data == profile.to_light_data()
            assert data["animation"]["type"] == "flame"

    def test_removal_resets_to_null(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        """Unequipping the last light writes the null profile."""
        entity = FakeEntity(name="Hero", items=[make_item(ru_light(40), equipped=False)])

        refresher.refresh(entity)

        assert sink.updates == [("token-1", NULL_PROFILE.to_light_data())]

    def test_logs_carry_entity_context(
        self, refresher: EntityLightRefresher, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "refresh.jsonl"
        configure_logging(level="DEBUG", filename=str(log_file), structured=True)
        entity = FakeEntity(name="Hero", items=[make_item(ru_light(40))])

        refresher.refresh(entity)

        entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        applied = [e for e in entries if e["message"].startswith("Applied light")]
        assert applied
        assert applied[-1]["context"]["entity"] == "Hero"

    def test_not_owner_is_skipped(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        entity = FakeEntity(name="Other", items=[make_item(ru_light(40))], is_owner=False)

        assert refresher.refresh(entity) is None
        assert sink.updates == []

    def test_no_tokens_is_skipped(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        entity = FakeEntity(name="Hero", items=[make_item(ru_light(40))], tokens=[])

        assert refresher.refresh(entity) is None
        assert sink.updates == []

    def test_sink_failure_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        refresher = EntityLightRefresher(RecordingSink(fail_on={"bad"}))
        entity = FakeEntity(name="Hero", items=[make_item(ru_light(40))], tokens=["bad"])

        with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError, match="rejected"):
            refresher.refresh(entity)

        assert "Hero" in caplog.text


class TestChangeHooks:
    """Tests for the change notification hooks."""

    def test_item_equip_triggers_refresh(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        item = make_item(ru_light(40))
        entity = FakeEntity(name="Hero", items=[item])

        result = refresher.on_item_updated(item, {"system": {"equipped": True}}, entity)

        assert result is not None
        assert len(sink.updates) == 1

    def test_irrelevant_item_change_ignored(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        item = make_item(ru_light(40))
        entity = FakeEntity(name="Hero", items=[item])

        assert refresher.on_item_updated(item, {"name": "Renamed"}, entity) is None
        assert sink.updates == []

    def test_unowned_item_ignored(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        item = make_item(ru_light(40))

        assert refresher.on_item_updated(item, {"system.equipped": True}, None) is None
        assert sink.updates == []

    def test_sink_failure_in_hook_is_logged_not_raised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        refresher = EntityLightRefresher(RecordingSink(fail_on={"bad"}))
        item = make_item(ru_light(40))
        entity = FakeEntity(name="Hero", items=[item], tokens=["bad"])

        with caplog.at_level(logging.ERROR):
            assert refresher.on_item_updated(item, {"system.equipped": True}, entity) is None
            assert refresher.on_entity_updated(entity, {"items": []}) is None

        assert "Light refresh failed for 'Hero'" in caplog.text

    def test_entity_item_set_change(
        self, refresher: EntityLightRefresher, sink: RecordingSink
    ) -> None:
        entity = FakeEntity(name="Hero", items=[make_item(ru_light(25))])

        assert refresher.on_entity_updated(entity, {"items": [{}]}) is not None
        assert refresher.on_entity_updated(entity, {"name": "Hero II"}) is None
        assert len(sink.updates) == 1


class TestRefreshAll:
    """Tests for EntityLightRefresher.refresh_all()."""

    def test_counts_applied_entities(self, caplog: pytest.LogCaptureFixture) -> None:
        sink = RecordingSink(fail_on={"broken"})
        refresher = EntityLightRefresher(sink)
        entities = [
            FakeEntity(name="A", items=[make_item(ru_light(10))]),
            FakeEntity(name="B", items=[], tokens=["broken"]),
            FakeEntity(name="C", items=[make_item(ru_light(20))], is_owner=False),
            FakeEntity(name="D", items=[], tokens=[]),
            FakeEntity(name="E", items=[make_item(ru_light(30))], tokens=["e1"]),
        ]

        with caplog.at_level(logging.INFO):
            count = refresher.refresh_all(entities)

        assert count == 2
        assert [token for token, _ in sink.updates] == ["token-1", "e1"]
        assert "Light refresh failed for 'B'" in caplog.text
        assert "applied to 2 entities" in caplog.text
