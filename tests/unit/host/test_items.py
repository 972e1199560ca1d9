"""Tests for host item accessors."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from lumenr.core.host.items import extract_description, get_path, is_equipped, item_name
from tests.fixtures import make_item


class TestGetPath:
    """Tests for get_path()."""

    def test_nested_mapping(self) -> None:
        assert get_path({"a": {"b": {"c": 3}}}, "a.b.c") == 3

    def test_attribute_object(self) -> None:
        obj = SimpleNamespace(a=SimpleNamespace(b=5))
        assert get_path(obj, "a.b") == 5

    def test_mixed_shapes(self) -> None:
        obj = SimpleNamespace(system={"equipped": True})
        assert get_path(obj, "system.equipped") is True

    def test_missing_segment_returns_default(self) -> None:
        assert get_path({"a": {}}, "a.b.c", default="x") == "x"
        assert get_path(SimpleNamespace(), "a", default=0) == 0

    def test_falsy_values_are_returned(self) -> None:
        assert get_path({"a": {"b": False}}, "a.b", default=True) is False


class TestExtractDescription:
    """Tests for extract_description()."""

    def test_description_value(self) -> None:
        assert extract_description(make_item("<p>x</p>")) == "<p>x</p>"

    def test_plain_string_description(self) -> None:
        assert extract_description({"system": {"description": "<p>y</p>"}}) == "<p>y</p>"

    def test_nested_data_system(self) -> None:
        item = {"data": {"system": {"description": {"value": "<p>z</p>"}}}}
        assert extract_description(item) == "<p>z</p>"

    def test_legacy_data_data(self) -> None:
        item = {"data": {"data": {"description": "<p>old</p>"}}}
        assert extract_description(item) == "<p>old</p>"

    @pytest.mark.parametrize(
        "item",
        [
            {},
            make_item(None),
            {"system": {"description": {"value": ""}}},
            {"system": {"description": {"value": 12}}},
            {"system": {"description": 12}},
        ],
    )
    def test_missing_or_non_text(self, item: dict) -> None:
        assert extract_description(item) is None


class TestItemFlags:
    """Tests for is_equipped() and item_name()."""

    def test_equipped(self) -> None:
        assert is_equipped(make_item("", equipped=True))
        assert not is_equipped(make_item("", equipped=False))
        assert not is_equipped({})

    def test_item_name(self) -> None:
        assert item_name(make_item("", name="Lantern")) == "Lantern"
        assert item_name({"name": 3}) is None
        assert item_name(SimpleNamespace(name="Torch")) == "Torch"
