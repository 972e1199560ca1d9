"""Descriptor grammars - language-specific labels of the light-source format.

A grammar holds the regex fragments the descriptor parser matches against
normalized description text, and the literal labels the authoring helper
writes. Numeric patterns capture their value in group 1; the color and
animation patterns capture the rest of the line.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PatternName = Literal[
    "marker",
    "bright",
    "dim",
    "legacy_range",
    "angle",
    "alpha",
    "color",
    "animation",
    "speed",
    "intensity",
]


@lru_cache(maxsize=128)
def _compile(source: str) -> re.Pattern[str]:
    return re.compile(source, re.IGNORECASE)


class GrammarLabels(BaseModel):
    """Literal labels written by the authoring helper."""

    model_config = ConfigDict(frozen=True)

    marker: str
    range_header: str
    bright: str
    dim: str
    color: str
    animation: str
    speed: str
    intensity: str
    angle: str
    alpha: str


class DescriptorGrammar(BaseModel):
    """Label patterns for one description language.

    Attributes:
        language: Language code ("ru", "en")
        marker: Phrase that must be present for an item to be a light source
        bright: Bright radius line, group 1 = 1-5 digits
        dim: Dim radius line, group 1 = 1-5 digits
        legacy_range: Older single-value lighting range line, used as dim
        angle: Cone angle line, group 1 = 1-3 digits
        alpha: Glow alpha line, group 1 = decimal with '.' or ','
        color: Color line, group 1 = rest of line
        animation: Animation line, group 1 = rest of line
        speed: Animation speed line, group 1 = 1-2 digits
        intensity: Animation intensity line, group 1 = 1-2 digits
        labels: Literal labels for authoring
    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(min_length=2, description="Language code")
    marker: str
    bright: str
    dim: str
    legacy_range: str
    angle: str
    alpha: str
    color: str
    animation: str
    speed: str
    intensity: str
    labels: GrammarLabels

    def pattern(self, name: PatternName) -> re.Pattern[str]:
        """Return the compiled, case-insensitive pattern for a field.

        Args:
            name: Pattern attribute name

        Returns:
            Compiled regex
        """
        return _compile(getattr(self, name))


RUSSIAN_GRAMMAR = DescriptorGrammar(
    language="ru",
    marker=r"Источник\s+света",
    # Ярк[а-яё]* covers gendered forms (Яркий, Яркая); it also matches
    # "Яркость", which is why the bright line is expected before alpha.
    bright=r"Ярк[а-яё]*\s*:\s*([0-9]{1,5})",
    dim=r"Тускл[а-яё]*\s*:\s*([0-9]{1,5})",
    legacy_range=r"Дальность\s*(?:\(\s*футы\s*\))?(?:\s*освещения)?\s*:\s*([0-9]{1,5})",
    angle=r"Угол\s*:\s*([0-9]{1,3})",
    alpha=r"(?:Прозрачность|Alpha|Альфа|Яркость|Насыщенность)\s*:\s*([0-9]*[.,]?[0-9]+)",
    color=r"Цвет\s*:\s*([^\n]+)",
    animation=r"Анимация\s*:\s*([^\n]+)",
    speed=r"Скорость\s*:\s*([0-9]{1,2})",
    intensity=r"Интенсивность\s*:\s*([0-9]{1,2})",
    labels=GrammarLabels(
        marker="Источник света",
        range_header="Дальность освещения (футы).",
        bright="Яркий",
        dim="Тусклый",
        color="Цвет",
        animation="Анимация",
        speed="Скорость",
        intensity="Интенсивность",
        angle="Угол",
        alpha="Прозрачность",
    ),
)

ENGLISH_GRAMMAR = DescriptorGrammar(
    language="en",
    marker=r"source\s+of\s+light",
    bright=r"\bbright\s*:\s*([0-9]{1,5})",
    dim=r"\bdim\s*:\s*([0-9]{1,5})",
    legacy_range=r"(?:lighting\s+)?range\s*(?:\(\s*feet\s*\))?\s*:\s*([0-9]{1,5})",
    angle=r"\bangle\s*:\s*([0-9]{1,3})",
    alpha=r"\b(?:transparency|alpha|brightness|saturation)\s*:\s*([0-9]*[.,]?[0-9]+)",
    color=r"\bcolou?r\s*:\s*([^\n]+)",
    animation=r"\banimation\s*:\s*([^\n]+)",
    speed=r"\bspeed\s*:\s*([0-9]{1,2})",
    intensity=r"\bintensity\s*:\s*([0-9]{1,2})",
    labels=GrammarLabels(
        marker="Source of light",
        range_header="Lighting range (feet).",
        bright="Bright",
        dim="Dim",
        color="Color",
        animation="Animation",
        speed="Speed",
        intensity="Intensity",
        angle="Angle",
        alpha="Transparency",
    ),
)

GRAMMARS: dict[str, DescriptorGrammar] = {
    RUSSIAN_GRAMMAR.language: RUSSIAN_GRAMMAR,
    ENGLISH_GRAMMAR.language: ENGLISH_GRAMMAR,
}


def get_grammar(language: str) -> DescriptorGrammar:
    """Look up a grammar by language code.

    Raises:
        KeyError: If no grammar is registered for the language
    """
    try:
        return GRAMMARS[language.lower()]
    except KeyError:
        raise KeyError(
            f"No descriptor grammar for language '{language}'. Available: {sorted(GRAMMARS)}"
        ) from None


__all__ = [
    "DescriptorGrammar",
    "ENGLISH_GRAMMAR",
    "GRAMMARS",
    "GrammarLabels",
    "PatternName",
    "RUSSIAN_GRAMMAR",
    "get_grammar",
]
