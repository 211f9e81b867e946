"""
tincture - design-token color resolution.

Keeps a registry of named colors and semantic usecases, resolves usecases
into concrete colors, derives mixes and tones, and checks WCAG contrast.
"""

from __future__ import annotations

from .core import ir
from .core.context import BuildContext
from .core.errors import (
    ConfigurationError,
    ContrastError,
    InvalidProperty,
    NotFound,
    OverrideConflict,
    TinctureError,
)

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "ir",
    "BuildContext",
    "TinctureError",
    "ConfigurationError",
    "InvalidProperty",
    "OverrideConflict",
    "NotFound",
    "ContrastError",
]
