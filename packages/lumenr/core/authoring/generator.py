"""Description authoring - render light-source descriptions from settings.

The output is the exact markup the descriptor parser expects, so a
description produced here always parses back to an equivalent profile.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lumenr.core.utils.math import scaled_floor
from lumenr.core.vocabulary.animation import display_name_for_animation
from lumenr.core.vocabulary.grammar import RUSSIAN_GRAMMAR, DescriptorGrammar

DEFAULT_RANGE = 40


def _format_alpha(alpha: float) -> str:
    # Fixed-point only; the grammar has no exponent form
    return f"{alpha:.6f}".rstrip("0").rstrip(".")


class DescriptionSettings(BaseModel):
    """User-entered light source settings.

    Attributes:
        bright: Bright radius; derived from dim when omitted
        dim: Dim radius; DEFAULT_RANGE when omitted
        color: Color token written verbatim
        animation: Canonical animation id
        speed: Animation speed 0-10
        intensity: Animation intensity 0-10
        angle: Emission cone 1-360 (written only when not 360)
        alpha: Glow alpha 0-1 (written only when > 0)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    bright: int | None = Field(default=None, ge=1, le=9999)
    dim: int | None = Field(default=None, ge=1, le=9999)
    color: str = Field(default="#ff8a00", min_length=1)
    animation: str = Field(default="flame", min_length=1)
    speed: int = Field(default=7, ge=0, le=10)
    intensity: int = Field(default=6, ge=0, le=10)
    angle: int = Field(default=360, ge=1, le=360)
    alpha: float = Field(default=0.0, ge=0.0, le=1.0)

    def resolved_radii(self) -> tuple[int, int]:
        """Return (bright, dim) with defaults applied and bright <= dim."""
        dim = self.dim if self.dim is not None else DEFAULT_RANGE
        bright = self.bright if self.bright is not None else scaled_floor(dim, 0.6)
        return min(bright, dim), dim


def description_lines(
    settings: DescriptionSettings, grammar: DescriptorGrammar = RUSSIAN_GRAMMAR
) -> list[str]:
    """Return the plain description lines for settings."""
    labels = grammar.labels
    bright, dim = settings.resolved_radii()
    animation = display_name_for_animation(settings.animation, grammar.language)

    lines = [
        labels.marker,
        labels.range_header,
        f"{labels.bright}: {bright}",
        f"{labels.dim}: {dim}",
        f"{labels.color}: {settings.color}",
        f"{labels.animation}: {animation}",
        f"{labels.speed}: {settings.speed}",
        f"{labels.intensity}: {settings.intensity}",
    ]
    if settings.angle != 360:
        lines.append(f"{labels.angle}: {settings.angle}")
    if settings.alpha > 0:
        lines.append(f"{labels.alpha}: {_format_alpha(settings.alpha)}")
    return lines


def render_description(
    settings: DescriptionSettings | None = None, grammar: DescriptorGrammar = RUSSIAN_GRAMMAR
) -> str:
    """Render description markup ready to paste into an item.

    Args:
        settings: Light settings (all defaults when None)
        grammar: Grammar whose labels are written

    Returns:
        A single ``<p>`` paragraph with ``<br>``-separated lines

    Example:
        >>> from lumenr.core.vocabulary.grammar import ENGLISH_GRAMMAR
        >>> render_description(DescriptionSettings(dim=30), ENGLISH_GRAMMAR)[:22]
        '<p>Source of light<br>'
    """
    lines = description_lines(settings or DescriptionSettings(), grammar)
    return f"<p>{'<br>'.join(lines)}</p>"


__all__ = [
    "DEFAULT_RANGE",
    "DescriptionSettings",
    "description_lines",
    "render_description",
]
