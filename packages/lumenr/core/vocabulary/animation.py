"""Animation vocabulary - canonical light animation ids and their aliases.

Descriptions may name an animation by its canonical English id or by a
localized alias. ANIMATION_SYNONYMS is the single lookup table the resolver
consults; it is built from the per-language alias tables below.
"""

from enum import Enum


class AnimationType(str, Enum):
    """Canonical light animation identifiers."""

    FLAME = "flame"
    TORCH = "torch"
    PULSE = "pulse"
    CHROMA = "chroma"
    WAVE = "wave"
    FOG = "fog"
    SUNBURST = "sunburst"
    ENERGY = "energy"
    GHOST = "ghost"
    SWIRL = "swirl"
    BUBBLES = "bubbles"
    VORTEX = "vortex"
    REVOLVING = "revolving"
    SMOKEPATCH = "smokepatch"
    STARLIGHT = "starlight"
    HEXA = "hexa"
    DOME = "dome"
    RAINBOWSWIRL = "rainbowswirl"
    SINE = "sine"
    GRID = "grid"
    FAIRY = "fairy"
    EMANATION = "emanation"
    WITCHWAVE = "witchwave"
    SIREN = "siren"
    RADIALRAINBOW = "radialrainbow"


# Aliases per language, first entry is the display name for that language.
# Canonical ids always resolve to themselves and need no entry here.
ANIMATION_ALIASES: dict[str, dict[AnimationType, tuple[str, ...]]] = {
    "en": {
        AnimationType.CHROMA: ("chroma", "rainbow"),
        AnimationType.SMOKEPATCH: ("smokepatch", "smoke"),
    },
    "ru": {
        AnimationType.FLAME: ("факел", "пламя", "огонь"),
        AnimationType.TORCH: ("мерцающий свет", "мерцающий"),
        AnimationType.PULSE: ("пульс",),
        AnimationType.CHROMA: ("хрома", "хроматический", "радуга"),
        AnimationType.WAVE: ("волна",),
        AnimationType.FOG: ("туман",),
        AnimationType.SUNBURST: ("солнце",),
        AnimationType.ENERGY: ("энергия",),
        AnimationType.GHOST: ("призрак",),
        AnimationType.SWIRL: ("вихрь", "закрутка"),
        AnimationType.BUBBLES: ("пузыри",),
        AnimationType.VORTEX: ("вихрь света",),
        AnimationType.REVOLVING: ("вращающийся",),
        AnimationType.SMOKEPATCH: ("дым",),
        AnimationType.STARLIGHT: ("звездный", "звёздный"),
        AnimationType.HEXA: ("гекс",),
        AnimationType.DOME: ("купол",),
        AnimationType.RAINBOWSWIRL: ("радужный вихрь",),
        AnimationType.SINE: ("синус",),
        AnimationType.GRID: ("сетка",),
        AnimationType.FAIRY: ("фея",),
        AnimationType.EMANATION: ("излучение",),
        AnimationType.WITCHWAVE: ("ведьмина волна",),
        AnimationType.SIREN: ("сигнальный маяк", "маяк"),
        AnimationType.RADIALRAINBOW: ("круговая радуга",),
    },
}


def _build_synonyms() -> dict[str, AnimationType]:
    synonyms: dict[str, AnimationType] = {a.value: a for a in AnimationType}
    for aliases in ANIMATION_ALIASES.values():
        for animation, names in aliases.items():
            for name in names:
                synonyms[name] = animation
    return synonyms


# Lowercased alias -> canonical animation
ANIMATION_SYNONYMS: dict[str, AnimationType] = _build_synonyms()


def display_name_for_animation(animation: str, language: str = "en") -> str:
    """Return the name an authored description should use for an animation.

    Args:
        animation: Canonical id (unknown ids are returned unchanged)
        language: Language code of the target grammar

    Returns:
        First alias registered for the language, else the id itself

    Example:
        >>> display_name_for_animation("flame", "ru")
        'факел'
        >>> display_name_for_animation("flame", "en")
        'flame'
    """
    try:
        key = AnimationType(animation)
    except ValueError:
        return animation

    names = ANIMATION_ALIASES.get(language, {}).get(key)
    return names[0] if names else key.value


__all__ = [
    "ANIMATION_ALIASES",
    "ANIMATION_SYNONYMS",
    "AnimationType",
    "display_name_for_animation",
]
