"""Animation resolution - maps raw animation tokens to canonical ids.

Resolution order:
1. Engine animation keys such as ``LIGHT.AnimationTorch`` -> ``torch``
2. ANIMATION_SYNONYMS lookup (English ids and localized aliases)
3. The token with every non a-z character removed

Whatever comes out must match ``^[a-z]{3,}$``, otherwise the result is None.
"""

from __future__ import annotations

import re

from lumenr.core.vocabulary.animation import ANIMATION_SYNONYMS

_ENGINE_KEY_RE = re.compile(r"light\.?animation([a-z]+)")
_NON_LETTER_RE = re.compile(r"[^a-z]")
_CANONICAL_RE = re.compile(r"^[a-z]{3,}$")


def normalize_animation(value: object) -> str | None:
    """Resolve a raw animation token to a canonical lowercase id.

    Args:
        value: Raw token (typically the rest of an "Animation:" line)

    Returns:
        Canonical id, or None when nothing usable remains

    Example:
        >>> normalize_animation("LIGHT.AnimationTorch")
        'torch'
        >>> normalize_animation("Пламя")
        'flame'
        >>> normalize_animation("???") is None
        True
    """
    if not isinstance(value, str) or not value:
        return None

    token = value.strip().lower()

    match = _ENGINE_KEY_RE.search(token)
    if match:
        candidate = match.group(1)
    elif token in ANIMATION_SYNONYMS:
        candidate = ANIMATION_SYNONYMS[token].value
    else:
        candidate = _NON_LETTER_RE.sub("", token)

    return candidate if _CANONICAL_RE.match(candidate) else None


__all__ = [
    "normalize_animation",
]
