"""Accessors for host item records.

Host items arrive either as plain mappings (exported JSON) or as document
objects with attributes. Both shapes are read through the same dotted-path
lookup so the pipeline never depends on a concrete host class.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """Read a dotted path from nested mappings and/or attribute objects.

    Args:
        obj: Root mapping or object
        path: Dotted path such as "system.description.value"
        default: Returned when any segment is missing

    Returns:
        The value at the path, or default

    Example:
        >>> get_path({"system": {"equipped": True}}, "system.equipped")
        True
    """
    current = obj
    for segment in path.split("."):
        if current is None:
            return default
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        else:
            current = getattr(current, segment, None)
            if current is None:
                return default
    return current


def extract_description(item: Any) -> str | None:
    """Return the description markup of an item, if it has one.

    Looks at ``system.description.value``, then ``system.description`` as a
    plain string (also under ``data.system``), then the legacy
    ``data.data.description``.
    """
    system = get_path(item, "system") or get_path(item, "data.system") or {}

    description = get_path(system, "description")
    if description:
        value = get_path(description, "value")
        description = value or description
    else:
        description = get_path(item, "data.data.description")

    if not description or not isinstance(description, str):
        return None
    return description


def is_equipped(item: Any) -> bool:
    """Return True when the item's equipped flag is set."""
    return bool(get_path(item, "system.equipped", False))


def item_name(item: Any) -> str | None:
    name = get_path(item, "name")
    return name if isinstance(name, str) else None


__all__ = [
    "extract_description",
    "get_path",
    "is_equipped",
    "item_name",
]
