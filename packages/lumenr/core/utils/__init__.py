"""Shared utilities for Lumenr."""

from lumenr.core.utils.math import clamp, is_finite_number, scaled_floor

# Note: logging module not imported here; it shadows the stdlib name.
# Import directly: from lumenr.core.utils.logging import get_logger

__all__ = [
    "clamp",
    "is_finite_number",
    "scaled_floor",
]
