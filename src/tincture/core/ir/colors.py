"""
Color value IR types.

A color value is either a concrete RGBA ``Color`` or one of the
``Sentinel`` values that stand for "no color" in stylesheet output.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Sentinel(StrEnum):
    """Non-color values a palette entry or usecase may hold."""

    TRANSPARENT = "transparent"
    UNDEFINED = "undefined"


class Color(BaseModel):
    """
    Concrete sRGB color with alpha.

    Example:
        Color(red=13, green=118, blue=128)  # teal, #0d7680
    """

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255, description="Red channel (0-255)")
    green: int = Field(ge=0, le=255, description="Green channel (0-255)")
    blue: int = Field(ge=0, le=255, description="Blue channel (0-255)")
    alpha: float = Field(default=1.0, ge=0.0, le=1.0, description="Opacity (0-1)")

    @property
    def channels(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def to_hex(self) -> str:
        """Format as ``#rrggbb``, or ``#rrggbbaa`` when translucent."""
        base = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if self.is_opaque:
            return base
        return f"{base}{round(self.alpha * 255):02x}"

    def to_css(self) -> str:
        """Format for stylesheet output (hex, or ``rgba()`` when translucent)."""
        if self.is_opaque:
            return self.to_hex()
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha:g})"

    def __str__(self) -> str:
        return self.to_hex()


ColorValue = Color | Sentinel


def format_color_value(value: ColorValue) -> str:
    """Render a color value for output or messages."""
    if isinstance(value, Sentinel):
        return value.value
    return value.to_css()
