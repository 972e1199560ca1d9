"""Color resolution - converts raw color tokens to canonical #rrggbb.

Recognized forms, tried in order (first match wins):
1. ``#rgb`` / ``#rrggbb``
2. ``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` (alpha ignored)
3. ``r, g, b``
4. A named color from ColorLibrary

Channels are clamped to [0, 255]. Anything else resolves to None.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from lumenr.core.libraries.color import ColorLibrary
from lumenr.core.utils.math import clamp

_HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6})$")
_RGB_FUNC_RE = re.compile(
    r"^rgba?\(([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})(?:\s*,\s*([0-9.]+))?\)$"
)
_RGB_LIST_RE = re.compile(r"^([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})$")


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Format channels as lowercase #rrggbb, clamping each to [0, 255].

    Example:
        >>> rgb_to_hex(255, 136, 0)
        '#ff8800'
    """
    return "#" + "".join(f"{clamp(channel, 0, 255):02x}" for channel in (r, g, b))


def _from_hex(match: re.Match[str]) -> str:
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return f"#{digits}"


def _from_channels(match: re.Match[str]) -> str:
    r, g, b = (int(match.group(i)) for i in (1, 2, 3))
    return rgb_to_hex(r, g, b)


ColorRule = tuple[re.Pattern[str], Callable[[re.Match[str]], str]]

COLOR_RULES: tuple[ColorRule, ...] = (
    (_HEX_RE, _from_hex),
    (_RGB_FUNC_RE, _from_channels),
    (_RGB_LIST_RE, _from_channels),
)


def parse_color(value: object) -> str | None:
    """Resolve a raw color token to canonical #rrggbb.

    Args:
        value: Raw token (typically the rest of a "Color:" line)

    Returns:
        Lowercase #rrggbb string, or None if the token is absent or unparseable

    Example:
        >>> parse_color("#F80")
        '#ff8800'
        >>> parse_color("300,0,0")
        '#ff0000'
        >>> parse_color("chartreuse") is None
        True
    """
    if not isinstance(value, str) or not value:
        return None

    token = value.strip().lower()
    for pattern, convert in COLOR_RULES:
        match = pattern.match(token)
        if match:
            return convert(match)

    return ColorLibrary.get_hex(token)


__all__ = [
    "COLOR_RULES",
    "parse_color",
    "rgb_to_hex",
]
