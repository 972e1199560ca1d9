"""Static lookup libraries."""

from lumenr.core.libraries.color import ColorLibrary, ColorPreset, ColorPresetDefinition

__all__ = [
    "ColorLibrary",
    "ColorPreset",
    "ColorPresetDefinition",
]
