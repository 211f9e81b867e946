"""
Pure-Python color algebra.

Parses color literals and derives new colors from existing ones: mixes
of two colors and tones at a target brightness. Only the RGB and HSB
operations needed for those derivations live here.
"""

from __future__ import annotations

import colorsys
import re
from typing import TYPE_CHECKING

from .errors import ConfigurationError
from .ir.colors import Color, ColorValue, Sentinel

if TYPE_CHECKING:
    from .palette import PaletteStore

BLACK = Color(red=0, green=0, blue=0)
WHITE = Color(red=255, green=255, blue=255)

_HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_RGB_RE = re.compile(
    r"^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)$"
)
# Only hex-digit and call-shaped strings are literals; "rgb-blue" and "#brand" are names.
_HEX_ATTEMPT_RE = re.compile(r"^#[0-9a-f]+$")
_RGB_CALL_RE = re.compile(r"^rgba?\s*\(")


def _round_channel(value: float) -> int:
    # Half up, clamped to the channel range.
    return max(0, min(255, int(value + 0.5)))


def _parse_hex(digits: str) -> Color:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    alpha = 1.0
    if len(digits) == 8:
        alpha = round(int(digits[6:8], 16) / 255, 4)
    return Color(red=red, green=green, blue=blue, alpha=alpha)


def parse_color(value: object) -> ColorValue | None:
    """Parse a color literal.

    Args:
        value: A ``Color``, a ``Sentinel``, or a string such as ``"#0d7680"``,
            ``"rgba(0, 0, 0, 0.5)"`` or ``"transparent"``.

    Returns:
        The color value, or None when ``value`` is a string that is not a
        literal (it is then a palette name).

    Raises:
        ConfigurationError: If ``value`` is not a color type, or looks like a
            literal but is malformed.
    """
    if isinstance(value, (Color, Sentinel)):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"Expected a color, got {type(value).__name__}: {value!r}")

    text = value.strip().lower()
    if text in (Sentinel.TRANSPARENT.value, Sentinel.UNDEFINED.value):
        return Sentinel(text)

    if _HEX_ATTEMPT_RE.match(text):
        match = _HEX_RE.match(text)
        if not match:
            raise ConfigurationError(f"Malformed hex color '{value}'")
        return _parse_hex(match.group(1))

    if _RGB_CALL_RE.match(text):
        match = _RGB_RE.match(text)
        if not match:
            raise ConfigurationError(f"Malformed rgb() color '{value}'")
        channels = [int(match.group(i)) for i in (1, 2, 3)]
        if any(ch > 255 for ch in channels):
            raise ConfigurationError(f"Channel out of range in '{value}'")
        alpha = float(match.group(4)) if match.group(4) is not None else 1.0
        if alpha > 1.0:
            raise ConfigurationError(f"Alpha out of range in '{value}'")
        return Color(red=channels[0], green=channels[1], blue=channels[2], alpha=alpha)

    return None


def to_hex(color: Color) -> str:
    """Format a color as lower-case hex."""
    return color.to_hex()


def resolve_color(value: Color | str, palette: PaletteStore | None = None) -> Color:
    """Turn a color, literal, or palette name into a concrete ``Color``.

    Raises:
        ConfigurationError: If the value is a sentinel, or is a name and no
            palette was given.
        NotFound: If the name is not in the palette.
    """
    parsed = parse_color(value)
    if parsed is None:
        if palette is None:
            raise ConfigurationError(
                f"'{value}' is not a color literal and no palette was given to look it up"
            )
        parsed = palette.get_by_name(str(value))
    if isinstance(parsed, Sentinel):
        raise ConfigurationError(f"'{value}' is '{parsed.value}', not a concrete color")
    return parsed


def _check_percentage(percentage: float, what: str) -> None:
    if not 0 <= percentage <= 100:
        raise ConfigurationError(f"{what} must be between 0 and 100, got {percentage}")


# =============================================================================
# Mixing
# =============================================================================


def mix(
    color: Color | str,
    background: Color | str,
    percentage: float = 50,
    palette: PaletteStore | None = None,
) -> Color:
    """Blend ``color`` over ``background``.

    Channels and alpha are interpolated linearly. ``percentage`` is the
    weight of ``color``: 100 gives ``color``, 0 gives ``background``.

    Args:
        color: Color, literal, or palette name.
        background: Color, literal, or palette name.
        percentage: Amount of ``color`` in the result (0-100).
        palette: Palette used to look up names.

    Returns:
        A new, unregistered color.
    """
    _check_percentage(percentage, "Mix percentage")
    first = resolve_color(color, palette)
    second = resolve_color(background, palette)

    weight = percentage / 100
    red, green, blue = (
        _round_channel(a * weight + b * (1 - weight))
        for a, b in zip(first.channels, second.channels, strict=True)
    )
    alpha = round(first.alpha * weight + second.alpha * (1 - weight), 4)
    return Color(red=red, green=green, blue=blue, alpha=min(1.0, max(0.0, alpha)))


# =============================================================================
# HSB and tones
# =============================================================================


def rgb_to_hsb(color: Color) -> tuple[float, float, float]:
    """Convert to hue (degrees), saturation (0-100), brightness (0-100)."""
    h, s, v = colorsys.rgb_to_hsv(*(ch / 255 for ch in color.channels))
    return (h * 360, s * 100, v * 100)


def hsb_to_rgb(hue: float, saturation: float, brightness: float, alpha: float = 1.0) -> Color:
    """Convert hue (degrees), saturation and brightness (0-100) to RGB."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360, saturation / 100, brightness / 100)
    return Color(
        red=_round_channel(r * 255),
        green=_round_channel(g * 255),
        blue=_round_channel(b * 255),
        alpha=alpha,
    )


def tone_from_brightness(
    color: Color | str,
    brightness: float,
    palette: PaletteStore | None = None,
) -> Color:
    """Derive a tone of ``color`` with the given HSB brightness.

    Black has no hue or saturation to keep, so its tones are mixes of black
    over white where ``brightness`` is the amount of black: a higher number
    gives a darker, denser shade. Every other color gets lighter as
    ``brightness`` rises.

    Args:
        color: Base color, literal, or palette name.
        brightness: Target brightness (0-100).
        palette: Palette used to look up names.

    Returns:
        A new, unregistered color.
    """
    _check_percentage(brightness, "Brightness")
    base = resolve_color(color, palette)

    if base.channels == BLACK.channels:
        return mix(BLACK.model_copy(update={"alpha": base.alpha}), WHITE, brightness)

    hue, saturation, _ = rgb_to_hsb(base)
    return hsb_to_rgb(hue, saturation, brightness, base.alpha)
