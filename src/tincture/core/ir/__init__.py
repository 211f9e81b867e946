"""
tincture Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .brandspec import BrandSpecYAML, ColorSpec, MixSpec, UsecaseSpec
from .colors import Color, ColorValue, Sentinel, format_color_value
from .registry import (
    ALL_PROPERTIES,
    COLOR_PROPERTIES,
    ColorEntry,
    ColorOptions,
    ColorRef,
    ContrastLevel,
    ContrastResult,
    Property,
    ResolvedColor,
    ResolvedColorSet,
    ResolveOptions,
    UsecaseEntry,
    UsecaseOptions,
)

__all__ = [
    # Colors
    "Color",
    "ColorValue",
    "Sentinel",
    "format_color_value",
    # Registry
    "ALL_PROPERTIES",
    "COLOR_PROPERTIES",
    "ColorEntry",
    "ColorOptions",
    "ColorRef",
    "Property",
    "UsecaseEntry",
    "UsecaseOptions",
    # Resolution
    "ResolveOptions",
    "ResolvedColor",
    "ResolvedColorSet",
    "ContrastLevel",
    "ContrastResult",
    # BrandSpec
    "BrandSpecYAML",
    "ColorSpec",
    "MixSpec",
    "UsecaseSpec",
]
