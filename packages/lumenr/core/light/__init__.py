"""Light profile models and multi-source combination."""

from lumenr.core.light.combiner import combine_profiles, dominant_profile
from lumenr.core.light.models import NULL_PROFILE, AnimationSpec, LightProfile

__all__ = [
    "AnimationSpec",
    "LightProfile",
    "NULL_PROFILE",
    "combine_profiles",
    "dominant_profile",
]
