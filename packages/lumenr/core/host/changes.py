"""Change relevance filters.

Hosts report document updates as diffs, either nested
(``{"system": {"equipped": True}}``) or flattened
(``{"system.equipped": True}``). Only some changes alter an entity's light.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Item diff paths that invalidate the owner's light
ITEM_LIGHT_PATHS = ("system.equipped", "system.description", "system.description.value")

# Entity diff paths that invalidate its light
ENTITY_LIGHT_PATHS = ("items", "system.traits")


def has_path(diff: Mapping[str, Any] | None, path: str) -> bool:
    """Return True if a diff contains a dotted path (nested or flattened).

    Example:
        >>> has_path({"system": {"equipped": False}}, "system.equipped")
        True
        >>> has_path({"system.description.value": "<p></p>"}, "system.description")
        True
    """
    if not diff:
        return False

    if path in diff:
        return True
    # Flattened keys below the path also count as a change of the path
    prefix = f"{path}."
    if any(isinstance(key, str) and key.startswith(prefix) for key in diff):
        return True

    head, _, rest = path.partition(".")
    if not rest:
        return False

    child = diff.get(head)
    if isinstance(child, Mapping):
        return has_path(child, rest)
    return False


def item_change_requires_refresh(diff: Mapping[str, Any] | None) -> bool:
    """True when an item diff touches its equipped flag or description."""
    return any(has_path(diff, path) for path in ITEM_LIGHT_PATHS)


def entity_change_requires_refresh(changes: Mapping[str, Any] | None) -> bool:
    """True when an entity diff touches its item set or traits."""
    return any(has_path(changes, path) for path in ENTITY_LIGHT_PATHS)


__all__ = [
    "ENTITY_LIGHT_PATHS",
    "ITEM_LIGHT_PATHS",
    "entity_change_requires_refresh",
    "has_path",
    "item_change_requires_refresh",
]
