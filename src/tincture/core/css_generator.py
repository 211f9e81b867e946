"""
CSS generator for tincture palettes.

Generates one custom property per palette entry and one utility class
per usecase property. Runs only after every registration for the build
has completed.
"""

from __future__ import annotations

from . import resolver
from .context import BuildContext
from .ir.colors import Sentinel, format_color_value
from .ir.registry import ColorEntry, Property
from .names import QualifiedName
from .palette import PaletteStore

_CSS_PROPERTIES: dict[Property, str] = {
    Property.BACKGROUND: "background-color",
    Property.BORDER: "border-color",
    Property.TEXT: "color",
    Property.OUTLINE: "outline-color",
}


def custom_property_name(name: QualifiedName) -> str:
    """``o-colors/teal`` -> ``--o-colors-teal``."""
    return f"--{name.namespace}-{name.identifier}"


def generate_palette_css(palette: PaletteStore, *, indent: int = 2) -> str:
    """
    Generate a :root block of custom properties for the palette.

    Undefined colors are skipped; deprecated colors get a comment.

    Args:
        palette: Finalized palette
        indent: Number of spaces for indentation

    Returns:
        CSS string
    """
    prefix = " " * indent
    lines = [":root {"]
    for entry in palette.entries():
        lines.extend(_entry_lines(entry, prefix))
    lines.append("}")
    return "\n".join(lines)


def _entry_lines(entry: ColorEntry, prefix: str) -> list[str]:
    if entry.value == Sentinel.UNDEFINED:
        return []
    lines: list[str] = []
    if entry.deprecated:
        lines.append(f"{prefix}/* deprecated: {entry.deprecated} */")
    lines.append(
        f"{prefix}{custom_property_name(entry.name)}: {format_color_value(entry.value)};"
    )
    return lines


def generate_usecase_css(ctx: BuildContext) -> str:
    """
    Generate utility classes for every usecase property.

    ``o-colors/link`` text becomes ``.o-colors-link-text { color: ... }``.
    Deprecation warnings are not collected into ``ctx.warnings``.
    """
    blocks: list[str] = []
    for entry in ctx.usecases.entries():
        for prop in entry.colors:
            resolved = resolver.resolve_property(ctx.usecases, entry.name.full, prop)
            if resolved.value == Sentinel.UNDEFINED:
                continue
            value = resolved.value
            selector = f".{entry.name.namespace}-{entry.name.identifier}-{prop.value}"
            blocks.append(
                f"{selector} {{\n  {_CSS_PROPERTIES[prop]}: {format_color_value(value)};\n}}"
            )
    return "\n\n".join(blocks)


def generate_css(ctx: BuildContext) -> str:
    """Generate the full stylesheet for a build context."""
    lines: list[str] = []
    lines.append(f"/* tincture palette: {ctx.brand or 'custom'} */")
    lines.append("/* Auto-generated - do not edit */")
    lines.append("")
    lines.append(generate_palette_css(ctx.palette))
    usecase_css = generate_usecase_css(ctx)
    if usecase_css:
        lines.append("")
        lines.append(usecase_css)
    lines.append("")
    return "\n".join(lines)
