"""Resolvers for raw color and animation tokens."""

from lumenr.core.resolvers.animation import normalize_animation
from lumenr.core.resolvers.color import parse_color, rgb_to_hex

__all__ = [
    "normalize_animation",
    "parse_color",
    "rgb_to_hex",
]
