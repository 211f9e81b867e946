"""Core tincture functionality: registries, color algebra, resolution, contrast checks."""

from . import ir
from .algebra import mix, parse_color, tone_from_brightness
from .context import BuildContext
from .contrast import check_contrast, classify_contrast, contrast_ratio, validate_contrast
from .defaults import list_brands, load_defaults
from .errors import (
    BrandSpecError,
    ConfigurationError,
    ContrastError,
    ErrorContext,
    InvalidProperty,
    NotFound,
    OverrideConflict,
    TinctureError,
)
from .names import DEFAULT_NAMESPACE, QualifiedName, parse_name
from .palette import PaletteStore
from .resolver import get_text_color, resolve_color_for, resolve_for, resolve_property
from .usecases import UsecaseStore

__all__ = [
    "ir",
    # Errors
    "TinctureError",
    "ConfigurationError",
    "InvalidProperty",
    "OverrideConflict",
    "NotFound",
    "ContrastError",
    "BrandSpecError",
    "ErrorContext",
    # Names
    "DEFAULT_NAMESPACE",
    "QualifiedName",
    "parse_name",
    # Registries
    "PaletteStore",
    "UsecaseStore",
    "BuildContext",
    "list_brands",
    "load_defaults",
    # Algebra
    "mix",
    "parse_color",
    "tone_from_brightness",
    # Resolution
    "resolve_color_for",
    "resolve_for",
    "resolve_property",
    "get_text_color",
    # Contrast
    "check_contrast",
    "classify_contrast",
    "contrast_ratio",
    "validate_contrast",
]
