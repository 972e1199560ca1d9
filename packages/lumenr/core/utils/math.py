"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def is_finite_number(value: object) -> bool:
    """Return True for ints and finite floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def scaled_floor(value: int, factor: float, minimum: int = 1) -> int:
    """Scale value by factor, round down, and keep at least ``minimum``."""
    return max(minimum, math.floor(value * factor))
