"""
BrandSpec YAML IR types for declarative color configuration.

Defines the structure of brandspec.yaml: which brand's defaults to load,
and the custom colors, tones, mixes and usecases a project registers on
top of them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..names import DEFAULT_NAMESPACE


class ColorSpec(BaseModel):
    """A custom color with its registration options."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(description="Color literal, e.g. '#0d7680' or 'transparent'")
    deprecated: str | None = Field(default=None, description="Deprecation message")
    allow_tones: bool = Field(default=False, description="Allow tones of this color")


class MixSpec(BaseModel):
    """A mix of two palette colors registered under a new name."""

    model_config = ConfigDict(frozen=True)

    color: str = Field(description="Color mixed in (name or literal)")
    background: str = Field(default="paper", description="Color mixed over")
    percentage: float = Field(default=50.0, ge=0.0, le=100.0, description="Amount of color")


class UsecaseSpec(BaseModel):
    """A custom usecase."""

    model_config = ConfigDict(frozen=True)

    background: str | None = None
    border: str | None = None
    text: str | None = None
    outline: str | None = None
    deprecated: str | None = Field(default=None, description="Deprecation message")

    def colors(self) -> dict[str, str]:
        return {
            prop: value
            for prop in ("background", "border", "text", "outline")
            if (value := getattr(self, prop)) is not None
        }


class BrandSpecYAML(BaseModel):
    """Root of brandspec.yaml."""

    model_config = ConfigDict(frozen=True)

    brand: str = Field(default="master", description="Brand whose defaults are loaded")
    namespace: str = Field(
        default=DEFAULT_NAMESPACE,
        description="Namespace for names given without one",
    )
    colors: dict[str, ColorSpec] = Field(default_factory=dict)
    tones: dict[str, list[float]] = Field(default_factory=dict)
    mixes: dict[str, MixSpec] = Field(default_factory=dict)
    usecases: dict[str, UsecaseSpec] = Field(default_factory=dict)

    @field_validator("colors", mode="before")
    @classmethod
    def _coerce_colors(cls, value: object) -> object:
        # Allow the short form `name: "#hex"` alongside the mapping form.
        if isinstance(value, dict):
            return {
                name: {"value": spec} if isinstance(spec, str) else spec
                for name, spec in value.items()
            }
        return value

    def qualify(self, name: str) -> str:
        """Prefix ``name`` with the spec namespace when it has none."""
        if "/" in name:
            return name
        return f"{self.namespace}/{name}"
