"""Authoring helpers that produce grammar-conformant descriptions."""

from lumenr.core.authoring.generator import (
    DEFAULT_RANGE,
    DescriptionSettings,
    description_lines,
    render_description,
)

__all__ = [
    "DEFAULT_RANGE",
    "DescriptionSettings",
    "description_lines",
    "render_description",
]
