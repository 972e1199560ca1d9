"""Combine the light profiles of an entity's active items.

Geometry (radii, cone, glow) takes the maximum across sources. Appearance
(color and animation) is never blended: the dominant source, the first one
with the largest dim radius, supplies it in full.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lumenr.core.light.models import (
    DEFAULT_ANIMATION_INTENSITY,
    DEFAULT_ANIMATION_SPEED,
    NULL_PROFILE,
    OMNIDIRECTIONAL_ANGLE,
    AnimationSpec,
    LightProfile,
)
from lumenr.core.utils.math import is_finite_number

logger = logging.getLogger(__name__)


def dominant_profile(profiles: Sequence[LightProfile]) -> LightProfile:
    """Return the first profile whose dim radius equals the maximum.

    Args:
        profiles: Non-empty sequence in entity iteration order

    Returns:
        The dominant profile

    Raises:
        ValueError: If profiles is empty
    """
    if not profiles:
        raise ValueError("Cannot pick a dominant profile from an empty sequence")

    max_dim = max(p.dim for p in profiles)
    return next(p for p in profiles if p.dim == max_dim)


def _combined_animation(dominant: LightProfile) -> AnimationSpec:
    animation = dominant.animation
    if not animation.type:
        return AnimationSpec(
            type=None, speed=DEFAULT_ANIMATION_SPEED, intensity=DEFAULT_ANIMATION_INTENSITY
        )

    speed = animation.speed if is_finite_number(animation.speed) else DEFAULT_ANIMATION_SPEED
    intensity = (
        animation.intensity
        if is_finite_number(animation.intensity)
        else DEFAULT_ANIMATION_INTENSITY
    )
    return AnimationSpec(type=animation.type, speed=speed, intensity=intensity)


def combine_profiles(profiles: Sequence[LightProfile]) -> LightProfile:
    """Merge the present profiles of one entity into its effective profile.

    Args:
        profiles: Present profiles in the entity's item iteration order

    Returns:
        NULL_PROFILE for no sources, the profile itself for one source,
        otherwise the combined profile

    Example:
        >>> torch = LightProfile(bright=20, dim=40, color="#ff8800")
        >>> candle = LightProfile(bright=5, dim=10, angle=60, color="#ffffff")
        >>> combine_profiles([candle, torch]).color
        '#ff8800'
    """
    if not profiles:
        return NULL_PROFILE
    if len(profiles) == 1:
        return profiles[0]

    dominant = dominant_profile(profiles)
    if any(p.is_omnidirectional for p in profiles):
        angle = OMNIDIRECTIONAL_ANGLE
    else:
        angle = max(p.angle for p in profiles)

    logger.debug(
        f"Combining {len(profiles)} light sources; dominant dim={dominant.dim} "
        f"color={dominant.color} animation={dominant.animation.type}"
    )

    bright = max(p.bright for p in profiles)
    if dominant.dim > 0:
        # Sources without a dim radius may carry any bright value
        bright = min(bright, dominant.dim)

    return LightProfile(
        bright=bright,
        dim=dominant.dim,
        angle=angle,
        color=dominant.color,
        alpha=min(1.0, max(p.alpha for p in profiles)),
        animation=_combined_animation(dominant),
    )


__all__ = [
    "combine_profiles",
    "dominant_profile",
]
