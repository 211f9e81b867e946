"""
BrandSpec persistence layer for tincture.

Handles reading and writing brand configuration to brandspec.yaml in the
project root, and applying it to a build context: the brand's defaults
first, then custom colors, tones, mixes and usecases in that order.

Default location: {project_root}/brandspec.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .algebra import parse_color
from .context import BuildContext
from .errors import BrandSpecError
from .ir.brandspec import BrandSpecYAML
from .ir.registry import ColorOptions, UsecaseOptions

logger = logging.getLogger(__name__)

BRANDSPEC_FILE = "brandspec.yaml"


# =============================================================================
# Path helpers
# =============================================================================


def get_brandspec_path(project_root: Path) -> Path:
    """Get the brandspec.yaml file path."""
    return project_root / BRANDSPEC_FILE


def brandspec_exists(project_root: Path) -> bool:
    """Check if a brandspec.yaml exists in the project."""
    return get_brandspec_path(project_root).exists()


# =============================================================================
# Loading
# =============================================================================


def _parse_brandspec_data(data: dict[str, Any]) -> BrandSpecYAML:
    """Parse BrandSpecYAML from raw YAML data."""
    if not isinstance(data, dict):
        raise BrandSpecError(f"Expected a mapping at the top level, got {type(data).__name__}")
    try:
        return BrandSpecYAML.model_validate(data)
    except ValidationError as e:
        raise BrandSpecError(f"Invalid BrandSpec schema: {e}") from e


def load_brandspec(project_root: Path, *, use_defaults: bool = True) -> BrandSpecYAML:
    """Load BrandSpec from brandspec.yaml.

    Args:
        project_root: Root directory of the project.
        use_defaults: If True, return the default BrandSpec when the file
            doesn't exist or is empty.

    Returns:
        BrandSpecYAML instance.

    Raises:
        BrandSpecError: If the file doesn't exist (when use_defaults=False) or is invalid.
    """
    brandspec_path = get_brandspec_path(project_root)

    if not brandspec_path.exists():
        if use_defaults:
            logger.debug("No brandspec.yaml found, using defaults")
            return create_default_brandspec()
        raise BrandSpecError(f"BrandSpec not found: {brandspec_path}")

    try:
        data = yaml.safe_load(brandspec_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise BrandSpecError(f"Invalid YAML in {brandspec_path}: {e}") from e

    if not data:
        if use_defaults:
            logger.warning(f"Empty brandspec.yaml at {brandspec_path}, using defaults")
            return create_default_brandspec()
        raise BrandSpecError(f"Empty or invalid YAML in {brandspec_path}")

    return _parse_brandspec_data(data)


def save_brandspec(project_root: Path, brandspec: BrandSpecYAML) -> Path:
    """Save BrandSpec to brandspec.yaml.

    Returns:
        Path to the saved brandspec.yaml file.
    """
    brandspec_path = get_brandspec_path(project_root)
    data = brandspec.model_dump(mode="json", exclude_defaults=True)

    brandspec_path.write_text(
        yaml.dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )

    logger.info(f"Saved BrandSpec to {brandspec_path}")
    return brandspec_path


def create_default_brandspec(brand: str = "master") -> BrandSpecYAML:
    """Create a BrandSpec that loads ``brand`` with no customizations."""
    return BrandSpecYAML(brand=brand)


# =============================================================================
# Applying
# =============================================================================


def _ref(ctx: BuildContext, spec: BrandSpecYAML, name: str) -> str:
    """Resolve a reference: spec namespace first, then the built-ins."""
    if "/" in name or parse_color(name) is not None:
        return name
    qualified = spec.qualify(name)
    if ctx.palette.exists(qualified):
        return qualified
    return name


def apply_brandspec(ctx: BuildContext, spec: BrandSpecYAML) -> BuildContext:
    """Register a BrandSpec's customizations into ``ctx``.

    Colors are registered first, then tones, mixes and usecases, so later
    sections may reference anything an earlier one defines. Errors from the
    registries propagate unchanged.
    """
    for name, color in spec.colors.items():
        ctx.set_color(
            spec.qualify(name),
            color.value,
            ColorOptions(deprecated=color.deprecated, allow_tones=color.allow_tones),
        )

    for name, levels in spec.tones.items():
        for brightness in levels:
            ctx.add_tone(_ref(ctx, spec, name), brightness)

    for name, mix_spec in spec.mixes.items():
        ctx.add_mix(
            spec.qualify(name),
            _ref(ctx, spec, mix_spec.color),
            _ref(ctx, spec, mix_spec.background),
            mix_spec.percentage,
        )

    for name, usecase in spec.usecases.items():
        ctx.set_usecase(
            spec.qualify(name),
            {prop: _ref(ctx, spec, ref) for prop, ref in usecase.colors().items()},
            UsecaseOptions(deprecated=usecase.deprecated),
        )

    logger.info(
        "Applied brandspec: %d colors, %d tone sets, %d mixes, %d usecases",
        len(spec.colors),
        len(spec.tones),
        len(spec.mixes),
        len(spec.usecases),
    )
    return ctx


def build_context_from_brandspec(project_root: Path) -> BuildContext:
    """Create a build context from the project's brandspec.yaml (or defaults)."""
    spec = load_brandspec(project_root)
    ctx = BuildContext.create(brand=spec.brand)
    return apply_brandspec(ctx, spec)
