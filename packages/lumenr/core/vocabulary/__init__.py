"""Vocabulary - controlled tables for animations and description grammars."""

from lumenr.core.vocabulary.animation import (
    ANIMATION_ALIASES,
    ANIMATION_SYNONYMS,
    AnimationType,
    display_name_for_animation,
)
from lumenr.core.vocabulary.grammar import (
    ENGLISH_GRAMMAR,
    GRAMMARS,
    RUSSIAN_GRAMMAR,
    DescriptorGrammar,
    GrammarLabels,
    get_grammar,
)

__all__ = [
    "ANIMATION_ALIASES",
    "ANIMATION_SYNONYMS",
    "AnimationType",
    "display_name_for_animation",
    "DescriptorGrammar",
    "ENGLISH_GRAMMAR",
    "GRAMMARS",
    "GrammarLabels",
    "RUSSIAN_GRAMMAR",
    "get_grammar",
]
