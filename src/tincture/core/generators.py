"""
Derived color generators.

Register tones and mixes of existing palette colors as new palette
entries. Tones are named ``<color>-<brightness>`` in the base color's
namespace; mixes take the name their table gives them.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .algebra import mix, tone_from_brightness
from .errors import ConfigurationError, ErrorContext
from .ir.registry import ColorEntry, ColorOptions
from .palette import PaletteStore

# =============================================================================
# Tones
# =============================================================================


def tone_name(color_name: str, brightness: float, palette: PaletteStore) -> str:
    """Full name of the tone of ``color_name`` at ``brightness``."""
    base = palette.get_entry(color_name).name
    return f"{base.namespace}/{base.identifier}-{brightness:g}"


def generate_tone(palette: PaletteStore, color_name: str, brightness: float) -> ColorEntry:
    """Register one tone of a palette color.

    Args:
        palette: Palette holding the base color; receives the tone.
        color_name: Base color name. Must have been set with ``allow_tones``.
        brightness: Target brightness (0-100).

    Returns:
        The registered tone entry.

    Raises:
        NotFound: If the base color does not exist.
        ConfigurationError: If the base color does not allow tones.
    """
    base = palette.get_entry(color_name)
    if not base.allow_tones:
        raise ConfigurationError(
            "tones are not allowed for this color; set it with allow_tones",
            ErrorContext(name=color_name),
        )
    value = tone_from_brightness(color_name, brightness, palette)
    return palette.set_color(
        tone_name(color_name, brightness, palette),
        value,
        ColorOptions(deprecated=base.deprecated),
    )


def generate_tones(
    palette: PaletteStore,
    tones: Mapping[str, Iterable[float]],
) -> list[ColorEntry]:
    """Register every tone in a ``color -> brightness list`` table."""
    for color_name in tones:
        if not palette.get_entry(color_name).allow_tones:
            raise ConfigurationError(
                "tones are not allowed for this color; set it with allow_tones",
                ErrorContext(name=color_name),
            )

    entries: list[ColorEntry] = []
    for color_name, levels in tones.items():
        for brightness in levels:
            entries.append(generate_tone(palette, color_name, brightness))
    return entries


# =============================================================================
# Mixes
# =============================================================================


def generate_mix(
    palette: PaletteStore,
    name: str,
    color: str,
    background: str,
    percentage: float,
) -> ColorEntry:
    """Register ``color`` mixed over ``background`` as ``name``."""
    return palette.set_color(name, mix(color, background, percentage, palette))


def generate_mixes(
    palette: PaletteStore,
    mixes: Mapping[str, tuple[str, str, float]],
) -> list[ColorEntry]:
    """Register every mix in a ``name -> (color, background, percentage)`` table."""
    return [
        generate_mix(palette, name, color, background, percentage)
        for name, (color, background, percentage) in mixes.items()
    ]
