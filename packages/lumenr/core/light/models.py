"""Light profile models.

A LightProfile is the normalized illumination state derived from one item
description, or the effective state of an entity after combination.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_ANIMATION_SPEED = 5
DEFAULT_ANIMATION_INTENSITY = 5
OMNIDIRECTIONAL_ANGLE = 360


class AnimationSpec(BaseModel):
    """Animation block of a light profile.

    Attributes:
        type: Canonical lowercase animation identifier, or None for no animation
        speed: Animation speed 0-10
        intensity: Animation intensity 0-10
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str | None = Field(
        default=None, pattern=r"^[a-z]{3,}$", description="Canonical animation identifier"
    )
    speed: int = Field(default=DEFAULT_ANIMATION_SPEED, ge=0, le=10)
    intensity: int = Field(default=DEFAULT_ANIMATION_INTENSITY, ge=0, le=10)


class LightProfile(BaseModel):
    """Illumination parameters for a single source or a combined entity.

    Immutable after creation; recompute and replace instead of mutating.

    Example:
        >>> profile = LightProfile(bright=20, dim=40, color="#ff8800")
        >>> profile.angle
        360
        >>> profile.to_light_data()["animation"]
        {'type': None, 'speed': 5, 'intensity': 5}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bright: int = Field(ge=0, description="Radius of full illumination")
    dim: int = Field(ge=0, description="Radius of partial illumination")
    angle: int = Field(default=OMNIDIRECTIONAL_ANGLE, ge=1, le=360, description="Emission cone")
    color: str | None = Field(
        default=None, pattern=r"^#[0-9a-f]{6}$", description="Color override as #rrggbb"
    )
    alpha: float = Field(default=0.0, ge=0.0, le=1.0, description="Overall glow intensity")
    animation: AnimationSpec = Field(default_factory=AnimationSpec)

    @model_validator(mode="after")
    def _bright_within_dim(self) -> Self:
        if self.dim > 0 and self.bright > self.dim:
            raise ValueError(f"bright ({self.bright}) must be <= dim ({self.dim})")
        return self

    @property
    def is_omnidirectional(self) -> bool:
        return self.angle == OMNIDIRECTIONAL_ANGLE

    def to_light_data(self) -> dict[str, Any]:
        """Return the plain value handed to a token sink."""
        return self.model_dump()


NULL_PROFILE = LightProfile(
    bright=0,
    dim=0,
    angle=OMNIDIRECTIONAL_ANGLE,
    color=None,
    alpha=0.0,
    animation=AnimationSpec(
        type=None, speed=DEFAULT_ANIMATION_SPEED, intensity=DEFAULT_ANIMATION_INTENSITY
    ),
)
"""Effective profile of an entity with no active light source."""


__all__ = [
    "AnimationSpec",
    "LightProfile",
    "NULL_PROFILE",
    "DEFAULT_ANIMATION_SPEED",
    "DEFAULT_ANIMATION_INTENSITY",
    "OMNIDIRECTIONAL_ANGLE",
]
