"""
Registry IR types.

Entries stored in the palette and usecase registries, the option structs
accepted by registration and resolution calls, and the ephemeral results
returned by resolution and contrast checks.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from ..names import QualifiedName
from .colors import Color, ColorValue, Sentinel

# A reference to a color inside a usecase: a literal value or a palette name.
ColorRef = Color | Sentinel | str


# =============================================================================
# Enums
# =============================================================================


class Property(StrEnum):
    """Usecase properties a color can be assigned to."""

    BACKGROUND = "background"
    BORDER = "border"
    TEXT = "text"
    OUTLINE = "outline"


# Properties covered by an "all" query, in lookup order.
COLOR_PROPERTIES: tuple[Property, ...] = (
    Property.BACKGROUND,
    Property.BORDER,
    Property.TEXT,
)

ALL_PROPERTIES = "all"


class ContrastLevel(StrEnum):
    """WCAG 2.x conformance of a foreground/background pair."""

    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA-large"
    FAIL = "fail"


# =============================================================================
# Palette
# =============================================================================


class ColorOptions(BaseModel):
    """Options accepted by ``PaletteStore.set_color``."""

    model_config = ConfigDict(frozen=True)

    deprecated: str | None = Field(
        default=None, description="Deprecation message shown when the color is used"
    )
    allow_tones: bool = Field(
        default=False, description="Whether tones may be generated from this color"
    )


class ColorEntry(BaseModel):
    """A registered palette color."""

    model_config = ConfigDict(frozen=True)

    name: QualifiedName
    value: ColorValue
    deprecated: str | None = None
    allow_tones: bool = False


# =============================================================================
# Usecases
# =============================================================================


class UsecaseOptions(BaseModel):
    """Options accepted by ``UsecaseStore.set_usecase``."""

    model_config = ConfigDict(frozen=True)

    deprecated: str | None = Field(
        default=None, description="Deprecation message for the whole usecase"
    )
    deprecated_properties: dict[Property, str] = Field(
        default_factory=dict, description="Deprecation messages per property"
    )


class UsecaseEntry(BaseModel):
    """A registered usecase: property -> color reference."""

    model_config = ConfigDict(frozen=True)

    name: QualifiedName
    colors: dict[Property, ColorRef]
    options: UsecaseOptions = Field(default_factory=UsecaseOptions)

    def defines(self, prop: Property) -> bool:
        return prop in self.colors

    def deprecation_for(self, prop: Property) -> str | None:
        """Deprecation message that applies when ``prop`` is read, if any."""
        return self.options.deprecated_properties.get(prop) or self.options.deprecated


# =============================================================================
# Resolution
# =============================================================================


class ResolveOptions(BaseModel):
    """Options accepted by ``resolve_color_for``."""

    model_config = ConfigDict(frozen=True)

    default: ColorRef | None = Field(
        default=None,
        description="Returned when no usecase matches (palette name, color, or sentinel)",
    )


class ResolvedColor(BaseModel):
    """A concrete color plus the usecase that produced it."""

    model_config = ConfigDict(frozen=True)

    value: ColorValue
    property: Property
    usecase: str | None = Field(
        default=None, description="Usecase that satisfied the query; None for defaults"
    )
    synthesized: bool = Field(
        default=False, description="True when text was derived from a background"
    )


class ResolvedColorSet(BaseModel):
    """Result of an ``all`` query: every color property the usecase defines."""

    model_config = ConfigDict(frozen=True)

    usecase: str | None = None
    background: ResolvedColor | None = None
    border: ResolvedColor | None = None
    text: ResolvedColor | None = None

    def as_dict(self) -> dict[Property, ResolvedColor]:
        found: dict[Property, ResolvedColor] = {}
        for prop in COLOR_PROPERTIES:
            resolved = getattr(self, prop.value)
            if resolved is not None:
                found[prop] = resolved
        return found


class ContrastResult(BaseModel):
    """Outcome of a contrast check."""

    model_config = ConfigDict(frozen=True)

    ratio: float
    level: ContrastLevel

    @property
    def passes(self) -> bool:
        return self.level != ContrastLevel.FAIL

    @property
    def large_text_only(self) -> bool:
        return self.level == ContrastLevel.AA_LARGE
