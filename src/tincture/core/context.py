"""
Build context.

Holds the palette and usecase registries for a single build, plus the
non-fatal warnings raised while resolving. Everything a stylesheet build
needs goes through one context, so separate builds (and tests) never
share state.

Usage:
    ctx = BuildContext.create(brand="master")
    ctx.set_color("o-example/brand", "#0d7680")
    ctx.set_usecase("o-example/stripe", {"background": "o-example/brand"})
    colors = ctx.resolve_for(["o-example/stripe", "page"], text_opacity=80)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from . import algebra, resolver
from .contrast import validate_contrast
from .defaults import DEFAULT_BRAND, load_defaults
from .generators import generate_mix, generate_tone
from .ir.colors import Color, ColorValue
from .ir.registry import (
    ColorEntry,
    ColorOptions,
    ColorRef,
    ContrastResult,
    Property,
    ResolvedColor,
    ResolvedColorSet,
    ResolveOptions,
    UsecaseEntry,
    UsecaseOptions,
)
from .palette import PaletteStore
from .usecases import UsecaseStore


@dataclass
class BuildContext:
    """Registries and collected warnings for one build."""

    palette: PaletteStore = field(default_factory=PaletteStore)
    usecases: UsecaseStore = field(init=False)
    brand: str | None = None
    warnings: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.usecases = UsecaseStore(self.palette)

    @classmethod
    def create(cls, brand: str = DEFAULT_BRAND, *, with_defaults: bool = True) -> BuildContext:
        """Create a context, loading ``brand``'s defaults unless told not to."""
        ctx = cls(brand=brand if with_defaults else None)
        if with_defaults:
            load_defaults(ctx.palette, ctx.usecases, brand)
        return ctx

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def set_color(
        self,
        name: str,
        value: Color | str,
        options: ColorOptions | None = None,
        *,
        deprecated: str | None = None,
        allow_tones: bool = False,
    ) -> ColorEntry:
        if options is None:
            options = ColorOptions(deprecated=deprecated, allow_tones=allow_tones)
        return self.palette.set_color(name, value, options)

    def set_usecase(
        self,
        name: str,
        colors_by_property: Mapping[str, ColorRef],
        options: UsecaseOptions | None = None,
        *,
        deprecated: str | None = None,
    ) -> UsecaseEntry:
        if options is None and deprecated is not None:
            options = UsecaseOptions(deprecated=deprecated)
        return self.usecases.set_usecase(name, colors_by_property, options)

    def add_tone(self, color_name: str, brightness: float) -> ColorEntry:
        return generate_tone(self.palette, color_name, brightness)

    def add_mix(self, name: str, color: str, background: str, percentage: float) -> ColorEntry:
        return generate_mix(self.palette, name, color, background, percentage)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_by_name(self, name: str) -> ColorValue:
        return self.palette.get_by_name(name)

    def get_usecase(self, name: str) -> UsecaseEntry | None:
        return self.usecases.get_usecase(name)

    def mix(self, color: Color | str, background: Color | str, percentage: float = 50) -> Color:
        return algebra.mix(color, background, percentage, self.palette)

    def tone_from_brightness(self, color: Color | str, brightness: float) -> Color:
        return algebra.tone_from_brightness(color, brightness, self.palette)

    def resolve_color_for(
        self,
        preference: str | Sequence[str],
        property: str,
        options: ResolveOptions | None = None,
        *,
        default: ColorRef | None = None,
    ) -> ResolvedColor | ResolvedColorSet:
        if options is None and default is not None:
            options = ResolveOptions(default=default)
        return resolver.resolve_color_for(
            self.usecases, preference, property, options, self.warnings
        )

    def resolve_for(
        self,
        preference: str | Sequence[str],
        properties: str | Sequence[str] | None = None,
        text_opacity: float | None = None,
    ) -> dict[Property, ResolvedColor]:
        return resolver.resolve_for(
            self.usecases, preference, properties, text_opacity, self.warnings
        )

    def get_text_color(
        self, background: Color | str, opacity: float = resolver.DEFAULT_TEXT_OPACITY
    ) -> Color:
        return resolver.get_text_color(background, opacity, self.palette, self.warnings)

    def validate_contrast(self, background: Color | str, foreground: Color | str) -> ContrastResult:
        return validate_contrast(
            algebra.resolve_color(background, self.palette),
            algebra.resolve_color(foreground, self.palette),
            self.warnings,
        )
