"""Light-source descriptor parsing.

Recognizes the light-source grammar inside an item description and builds a
LightProfile. The description must carry the grammar's marker phrase and a
usable dim radius; everything else is optional and falls back to defaults.

Example description (Russian grammar, after markup normalization):

    Источник света
    Дальность освещения (футы).
    Яркий: 20
    Тусклый: 40
    Цвет: #ff8800
    Анимация: факел
    Скорость: 5
    Интенсивность: 5
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from lumenr.core.host.items import extract_description, item_name
from lumenr.core.light.models import AnimationSpec, LightProfile
from lumenr.core.parsers.markup import to_plain_text
from lumenr.core.resolvers.animation import normalize_animation
from lumenr.core.resolvers.color import parse_color
from lumenr.core.utils.math import clamp, scaled_floor
from lumenr.core.vocabulary.grammar import RUSSIAN_GRAMMAR, DescriptorGrammar, PatternName

logger = logging.getLogger(__name__)

# Share of the dim radius used for bright when bright is not given
DEFAULT_BRIGHT_RATIO = 0.6


def match_int(text: str, grammar: DescriptorGrammar, name: PatternName) -> int | None:
    """Return the integer captured by a grammar pattern, or None."""
    match = grammar.pattern(name).search(text)
    if not match:
        return None
    return int(match.group(1))


def extract_int(
    text: str,
    grammar: DescriptorGrammar,
    name: PatternName,
    *,
    default: int,
    minimum: int,
    maximum: int,
) -> int:
    """Return the captured integer clamped to [minimum, maximum], or default."""
    value = match_int(text, grammar, name)
    if value is None:
        return default
    return clamp(value, minimum, maximum)


def extract_float(
    text: str,
    grammar: DescriptorGrammar,
    name: PatternName,
    *,
    default: float,
    minimum: float,
    maximum: float,
) -> float:
    """Return the captured decimal ('.' or ',' separator) clamped, or default."""
    match = grammar.pattern(name).search(text)
    if not match:
        return default
    try:
        value = float(match.group(1).replace(",", "."))
    except ValueError:
        return default
    return clamp(value, minimum, maximum)


def extract_string(text: str, grammar: DescriptorGrammar, name: PatternName) -> str:
    """Return the trimmed rest-of-line captured by a grammar pattern, or ''."""
    match = grammar.pattern(name).search(text)
    if not match:
        return ""
    return match.group(1).strip()


@dataclass(frozen=True)
class FieldRule:
    """One optional profile field: where it comes from and how it is read.

    Attributes:
        name: Key of the extracted value
        extract: Callable taking (plain_text, grammar) and returning the value
    """

    name: str
    extract: Callable[[str, DescriptorGrammar], Any]

    def apply(self, text: str, grammar: DescriptorGrammar) -> Any:
        return self.extract(text, grammar)


def _resolved_string(
    resolver: Callable[[str], Any], name: PatternName
) -> Callable[[str, DescriptorGrammar], Any]:
    def extract(text: str, grammar: DescriptorGrammar) -> Any:
        return resolver(extract_string(text, grammar, name))

    return extract


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("angle", partial(extract_int, name="angle", default=360, minimum=1, maximum=360)),
    FieldRule(
        "alpha", partial(extract_float, name="alpha", default=0.0, minimum=0.0, maximum=1.0)
    ),
    FieldRule("color", _resolved_string(parse_color, "color")),
    FieldRule("animation", _resolved_string(normalize_animation, "animation")),
    FieldRule("speed", partial(extract_int, name="speed", default=5, minimum=0, maximum=10)),
    FieldRule(
        "intensity", partial(extract_int, name="intensity", default=5, minimum=0, maximum=10)
    ),
)


def _resolve_radii(text: str, grammar: DescriptorGrammar) -> tuple[int, int] | None:
    bright = match_int(text, grammar, "bright")
    dim = match_int(text, grammar, "dim")

    if dim is None or dim <= 0:
        legacy = match_int(text, grammar, "legacy_range")
        if legacy is not None and legacy > 0:
            logger.debug(f"Using legacy lighting range {legacy} as dim radius")
            dim = legacy

    if dim is None or dim <= 0:
        return None

    if bright is None or bright <= 0:
        bright = scaled_floor(dim, DEFAULT_BRIGHT_RATIO)

    return min(bright, dim), dim


def _parse(description: str, grammar: DescriptorGrammar) -> LightProfile | None:
    text = to_plain_text(description)
    if not grammar.pattern("marker").search(text):
        return None

    radii = _resolve_radii(text, grammar)
    if radii is None:
        logger.debug("Marker phrase found but no usable dim radius")
        return None
    bright, dim = radii

    fields = {rule.name: rule.apply(text, grammar) for rule in FIELD_RULES}

    return LightProfile(
        bright=bright,
        dim=dim,
        angle=fields["angle"],
        color=fields["color"],
        alpha=fields["alpha"],
        animation=AnimationSpec(
            type=fields["animation"],
            speed=fields["speed"],
            intensity=fields["intensity"],
        ),
    )


def parse_light_profile(
    description: object,
    grammar: DescriptorGrammar = RUSSIAN_GRAMMAR,
    *,
    name: str | None = None,
) -> LightProfile | None:
    """Parse one item description into a light profile.

    Args:
        description: Raw description markup
        grammar: Label grammar of the description language
        name: Item name, used only in log messages

    Returns:
        The profile, or None if the item is not a (valid) light source.
        Malformed input never raises; it yields None.

    Example:
        >>> from lumenr.core.vocabulary.grammar import ENGLISH_GRAMMAR
        >>> parse_light_profile("<p>Source of light<br>Dim: 30</p>", ENGLISH_GRAMMAR).bright
        18
    """
    if not isinstance(description, str) or not description:
        return None

    try:
        return _parse(description, grammar)
    except Exception:
        logger.warning(
            f"Failed to parse light description of {name or '<unnamed>'}", exc_info=True
        )
        return None


def parse_item(
    item: Mapping[str, Any] | Any, grammar: DescriptorGrammar = RUSSIAN_GRAMMAR
) -> LightProfile | None:
    """Parse the description of an item record.

    Args:
        item: Item mapping or object exposing ``system.description``
        grammar: Label grammar of the description language

    Returns:
        The item's light profile, or None (also when the item itself
        cannot be read)
    """
    try:
        description = extract_description(item)
        name = item_name(item)
    except Exception:
        logger.warning("Failed to read light description from item", exc_info=True)
        return None

    if description is None:
        return None
    return parse_light_profile(description, grammar, name=name)


__all__ = [
    "DEFAULT_BRIGHT_RATIO",
    "FIELD_RULES",
    "FieldRule",
    "extract_float",
    "extract_int",
    "extract_string",
    "match_int",
    "parse_item",
    "parse_light_profile",
]
