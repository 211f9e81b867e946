"""
Built-in palettes, tone and mix tables, and usecases per brand.

Each brand lists its colors, the colors tones may be generated from,
the tones and mixes to register, and the default usecases. All names are
in the default namespace and are registered once per build context,
before any custom registration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import ConfigurationError
from .generators import generate_mixes, generate_tones
from .ir.registry import ColorOptions, UsecaseOptions
from .names import DEFAULT_NAMESPACE
from .palette import PaletteStore
from .usecases import UsecaseStore

logger = logging.getLogger(__name__)

DEFAULT_BRAND = "master"


@dataclass(frozen=True)
class BrandDefaults:
    """Static color data for one brand."""

    name: str
    colors: dict[str, str]
    tone_colors: frozenset[str] = frozenset()
    tones: dict[str, tuple[int, ...]] = field(default_factory=dict)
    mixes: dict[str, tuple[str, str, float]] = field(default_factory=dict)
    usecases: dict[str, dict[str, str]] = field(default_factory=dict)
    deprecated: dict[str, str] = field(default_factory=dict)


def _black_mixes(background: str) -> dict[str, tuple[str, str, float]]:
    return {
        f"black-{pct}": ("black", background, pct) for pct in (5, 10, 20, 30, 40, 50, 60, 70, 80, 90)
    }


def _white_mixes() -> dict[str, tuple[str, str, float]]:
    return {f"white-{pct}": ("white", "black", pct) for pct in (10, 20, 30, 40, 50, 60, 70, 80)}


# =============================================================================
# Master brand
# =============================================================================

MASTER_BRAND = BrandDefaults(
    name="master",
    colors={
        "transparent": "transparent",
        "paper": "#fff1e5",
        "wheat": "#f2dfce",
        "white": "#ffffff",
        "black": "#000000",
        "claret": "#990f3d",
        "oxford": "#0f5499",
        "teal": "#0d7680",
        "slate": "#262a33",
        "sky": "#cce6ff",
        "velvet": "#593380",
        "candy": "#ff7faa",
        "wasabi": "#96cc28",
        "jade": "#00994d",
        "crimson": "#cc0000",
        "mandarin": "#ff8833",
        "lemon": "#ffec1a",
        "org-b2c": "#4e96eb",
    },
    tone_colors=frozenset({"claret", "oxford", "teal", "jade", "crimson", "mandarin", "velvet"}),
    tones={
        "claret": (30, 40, 50, 60, 70, 80, 90, 100),
        "oxford": (30, 40, 60, 70, 80, 90, 100),
        "teal": (20, 40, 50, 60, 80, 90, 100),
        "jade": (40, 60, 80, 100),
        "crimson": (40, 60, 80, 100),
    },
    mixes={**_black_mixes("paper"), **_white_mixes()},
    usecases={
        "page": {"background": "paper", "text": "black-80"},
        "box": {"background": "wheat"},
        "body": {"text": "black-80"},
        "title": {"text": "black-90"},
        "muted": {"text": "black-60"},
        "link": {"text": "teal"},
        "link-hover": {"text": "black-70"},
        "link-title": {"text": "black-90"},
        "link-title-hover": {"text": "black-70"},
        "focus": {"outline": "teal"},
        "product-brand": {"background": "claret"},
        "button": {"background": "teal", "border": "teal", "text": "white"},
        "highlight": {"background": "lemon"},
        "error": {"border": "crimson", "text": "crimson"},
        "tag-link": {"text": "claret"},
        "opinion": {"background": "sky"},
        "b2c": {"background": "org-b2c"},
    },
    deprecated={"org-b2c": "use 'oxford' for B2C accents"},
)

# =============================================================================
# Internal brand
# =============================================================================

INTERNAL_BRAND = BrandDefaults(
    name="internal",
    colors={
        "transparent": "transparent",
        "white": "#ffffff",
        "black": "#000000",
        "slate": "#262a33",
        "oxford": "#0f5499",
        "teal": "#0d7680",
        "crimson": "#cc0000",
        "jade": "#00994d",
        "lemon": "#ffec1a",
    },
    tone_colors=frozenset({"oxford", "teal", "crimson", "jade"}),
    tones={
        "oxford": (30, 40, 60, 80, 90, 100),
        "teal": (40, 60, 80, 100),
    },
    mixes={**_black_mixes("white"), **_white_mixes()},
    usecases={
        "page": {"background": "white", "text": "slate"},
        "box": {"background": "black-5"},
        "body": {"text": "slate"},
        "title": {"text": "black"},
        "muted": {"text": "black-60"},
        "link": {"text": "teal"},
        "link-hover": {"text": "black-70"},
        "focus": {"outline": "oxford"},
        "button": {"background": "oxford", "border": "oxford", "text": "white"},
        "highlight": {"background": "lemon"},
        "error": {"border": "crimson", "text": "crimson"},
    },
)

# =============================================================================
# Whitelabel brand
# =============================================================================

WHITELABEL_BRAND = BrandDefaults(
    name="whitelabel",
    colors={
        "transparent": "transparent",
        "white": "#ffffff",
        "black": "#000000",
    },
    mixes=_black_mixes("white"),
    usecases={
        "page": {"background": "white", "text": "black"},
        "body": {"text": "black"},
        "muted": {"text": "black-60"},
        "link": {"text": "black"},
        "focus": {"outline": "black"},
    },
)

BRANDS: dict[str, BrandDefaults] = {
    brand.name: brand for brand in (MASTER_BRAND, INTERNAL_BRAND, WHITELABEL_BRAND)
}


def list_brands() -> list[str]:
    return list(BRANDS)


def get_brand(name: str) -> BrandDefaults:
    """Return the defaults for ``name``.

    Raises:
        ConfigurationError: If the brand is unknown.
    """
    brand = BRANDS.get(name)
    if brand is None:
        raise ConfigurationError(
            f"Unknown brand '{name}', expected one of: {', '.join(BRANDS)}"
        )
    return brand


def _qualify(identifier: str) -> str:
    return f"{DEFAULT_NAMESPACE}/{identifier}"


def load_defaults(
    palette: PaletteStore,
    usecases: UsecaseStore,
    brand: str = DEFAULT_BRAND,
) -> BrandDefaults:
    """Register a brand's default palette, tones, mixes, and usecases.

    Loading the same brand twice is a no-op, since every entry is
    re-registered with an identical value.
    """
    defaults = get_brand(brand)

    for identifier, value in defaults.colors.items():
        palette.set_color(
            _qualify(identifier),
            value,
            ColorOptions(
                deprecated=defaults.deprecated.get(identifier),
                allow_tones=identifier in defaults.tone_colors,
            ),
        )

    generate_tones(palette, {_qualify(name): levels for name, levels in defaults.tones.items()})
    generate_mixes(
        palette,
        {
            _qualify(name): (_qualify(color), _qualify(background), pct)
            for name, (color, background, pct) in defaults.mixes.items()
        },
    )

    for identifier, colors in defaults.usecases.items():
        usecases.set_usecase(
            _qualify(identifier),
            {prop: _qualify(ref) for prop, ref in colors.items()},
            UsecaseOptions(deprecated=defaults.deprecated.get(identifier)),
        )

    logger.info(
        "Loaded %s brand defaults: %d colors, %d usecases", brand, len(palette), len(usecases)
    )
    return defaults
