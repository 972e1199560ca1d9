"""Named color library used by the color resolver."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ColorPreset(str, Enum):
    """Color names accepted in a description's color line."""

    WHITE = "white"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ORANGE = "orange"
    YELLOW = "yellow"
    PURPLE = "purple"
    PINK = "pink"


class ColorPresetDefinition(BaseModel):
    """Definition of a named color.

    Attributes:
        color_id: Lowercase name as written in descriptions
        name: Human-readable name
        hex_value: Canonical #rrggbb value
    """

    model_config = ConfigDict(frozen=True)

    color_id: str = Field(min_length=1, description="Lowercase color name")
    name: str = Field(min_length=1, description="Human-readable name")
    hex_value: str = Field(pattern=r"^#[0-9a-f]{6}$", description="Canonical hex value")


class ColorLibrary:
    """Library of named colors mapped to canonical hex values.

    The table is intentionally small; anything else must be written as
    hex, rgb() or an r,g,b triplet.
    """

    PRESETS: dict[ColorPreset, ColorPresetDefinition] = {
        ColorPreset.WHITE: ColorPresetDefinition(color_id="white", name="White", hex_value="#ffffff"),
        ColorPreset.BLACK: ColorPresetDefinition(color_id="black", name="Black", hex_value="#000000"),
        ColorPreset.RED: ColorPresetDefinition(color_id="red", name="Red", hex_value="#ff0000"),
        ColorPreset.GREEN: ColorPresetDefinition(color_id="green", name="Green", hex_value="#00ff00"),
        ColorPreset.BLUE: ColorPresetDefinition(color_id="blue", name="Blue", hex_value="#0000ff"),
        ColorPreset.ORANGE: ColorPresetDefinition(
            color_id="orange", name="Orange", hex_value="#ffa500"
        ),
        ColorPreset.YELLOW: ColorPresetDefinition(
            color_id="yellow", name="Yellow", hex_value="#ffff00"
        ),
        ColorPreset.PURPLE: ColorPresetDefinition(
            color_id="purple", name="Purple", hex_value="#800080"
        ),
        ColorPreset.PINK: ColorPresetDefinition(color_id="pink", name="Pink", hex_value="#ffc0cb"),
    }

    @classmethod
    def get_hex(cls, name: str) -> str | None:
        """Look up a color name (exact, lowercase) and return its hex value.

        Args:
            name: Color name, already trimmed and lowercased

        Returns:
            Canonical hex value, or None for unknown names
        """
        try:
            preset = ColorPreset(name)
        except ValueError:
            return None
        return cls.PRESETS[preset].hex_value

    @classmethod
    def list_names(cls) -> list[str]:
        """Return all known color names."""
        return [preset.value for preset in cls.PRESETS]


__all__ = [
    "ColorLibrary",
    "ColorPreset",
    "ColorPresetDefinition",
]
