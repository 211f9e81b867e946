"""
tincture CLI.

``tincture palette``: List palette colors.
``tincture resolve``: Resolve usecases to colors.
``tincture mix``: Mix two colors.
``tincture tone``: Tone of a color at a brightness.
``tincture text-color``: Derive a text color for a background.
``tincture contrast``: WCAG contrast of a pair.
``tincture css``: Emit custom properties and usecase classes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from tincture import __version__
from tincture.core.context import BuildContext
from tincture.core.errors import TinctureError
from tincture.core.ir.colors import Color, ColorValue, format_color_value

app = typer.Typer(
    help="tincture: design-token color resolution",
    no_args_is_help=True,
)

console = Console()

ProjectOption = Annotated[
    Path,
    typer.Option("--project", "-p", help="Project root containing brandspec.yaml"),
]
BrandOption = Annotated[
    str | None,
    typer.Option("--brand", "-b", help="Brand defaults to load (overrides brandspec.yaml)"),
]


def get_version() -> str:
    """Get tincture version from package metadata."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("tincture")
    except PackageNotFoundError:
        return __version__


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tincture {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """tincture CLI main callback for global options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _handle_errors(func: Callable[..., None]) -> Callable[..., None]:
    """Turn tincture errors into a red message and exit code 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            func(*args, **kwargs)
        except TinctureError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
            raise typer.Exit(code=1) from e

    return wrapper


def _load_context(project: Path, brand: str | None) -> BuildContext:
    from tincture.core.brandspec_loader import apply_brandspec, load_brandspec

    spec = load_brandspec(project.resolve())
    ctx = BuildContext.create(brand=brand or spec.brand)
    return apply_brandspec(ctx, spec)


def _swatch(value: ColorValue) -> Text:
    label = format_color_value(value)
    if isinstance(value, Color):
        if not value.is_opaque:
            return Text(label)
        return Text(f"  {label}", style=f"on {value.to_hex()}")
    return Text(label, style="dim")


def _print_warnings(ctx: BuildContext) -> None:
    for warning in ctx.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}", highlight=False)


# =============================================================================
# Commands
# =============================================================================


@app.command(name="palette")
@_handle_errors
def palette_command(project: ProjectOption = Path("."), brand: BrandOption = None) -> None:
    """List every color in the palette."""
    ctx = _load_context(project, brand)

    table = Table(title=f"Palette ({ctx.brand})")
    table.add_column("Name")
    table.add_column("Value")
    table.add_column("Tones")
    table.add_column("Deprecated")
    for entry in ctx.palette.entries():
        table.add_row(
            entry.name.key,
            _swatch(entry.value),
            "yes" if entry.allow_tones else "",
            entry.deprecated or "",
        )
    console.print(table)


@app.command(name="resolve")
@_handle_errors
def resolve_command(
    usecases: Annotated[list[str], typer.Argument(help="Usecases, most preferred first")],
    prop: Annotated[
        list[str] | None,
        typer.Option("--property", help="Property to resolve (repeatable)"),
    ] = None,
    text_opacity: Annotated[
        float | None, typer.Option("--text-opacity", help="Opacity of derived text (0-100)")
    ] = None,
    project: ProjectOption = Path("."),
    brand: BrandOption = None,
) -> None:
    """Resolve usecases into colors, deriving text from the background if needed."""
    ctx = _load_context(project, brand)
    resolved = ctx.resolve_for(usecases, prop or None, text_opacity)

    if not resolved:
        typer.echo("No usecase defines the requested properties.")
        raise typer.Exit(code=0)

    table = Table()
    table.add_column("Property")
    table.add_column("Value")
    table.add_column("Usecase")
    for name, color in resolved.items():
        source = f"{color.usecase} (derived)" if color.synthesized else str(color.usecase)
        table.add_row(name.value, _swatch(color.value), source)
    console.print(table)
    _print_warnings(ctx)


@app.command(name="mix")
@_handle_errors
def mix_command(
    color: Annotated[str, typer.Argument(help="Color mixed in (name or literal)")],
    background: Annotated[str, typer.Argument(help="Color mixed over (name or literal)")],
    percentage: Annotated[
        float, typer.Option("--percentage", "-n", help="Amount of COLOR (0-100)")
    ] = 50,
    project: ProjectOption = Path("."),
    brand: BrandOption = None,
) -> None:
    """Mix COLOR over BACKGROUND."""
    ctx = _load_context(project, brand)
    typer.echo(ctx.mix(color, background, percentage).to_hex())


@app.command(name="tone")
@_handle_errors
def tone_command(
    color: Annotated[str, typer.Argument(help="Base color (name or literal)")],
    brightness: Annotated[float, typer.Argument(help="Target brightness (0-100)")],
    project: ProjectOption = Path("."),
    brand: BrandOption = None,
) -> None:
    """Tone of COLOR at BRIGHTNESS."""
    ctx = _load_context(project, brand)
    typer.echo(ctx.tone_from_brightness(color, brightness).to_hex())


@app.command(name="text-color")
@_handle_errors
def text_color_command(
    background: Annotated[str, typer.Argument(help="Background color (name or literal)")],
    opacity: Annotated[float, typer.Option("--opacity", "-o", help="Text opacity (0-100)")] = 100,
    project: ProjectOption = Path("."),
    brand: BrandOption = None,
) -> None:
    """Derive a legible text color for BACKGROUND."""
    ctx = _load_context(project, brand)
    typer.echo(ctx.get_text_color(background, opacity).to_hex())
    _print_warnings(ctx)


@app.command(name="contrast")
@_handle_errors
def contrast_command(
    background: Annotated[str, typer.Argument(help="Background color (name or literal)")],
    foreground: Annotated[str, typer.Argument(help="Foreground color (name or literal)")],
    project: ProjectOption = Path("."),
    brand: BrandOption = None,
) -> None:
    """WCAG contrast of FOREGROUND on BACKGROUND. Exits 1 below 3:1."""
    ctx = _load_context(project, brand)
    result = ctx.validate_contrast(background, foreground)
    typer.echo(f"{result.ratio:.2f}:1 {result.level.value}")
    _print_warnings(ctx)


@app.command(name="css")
@_handle_errors
def css_command(
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write to a file instead of stdout")
    ] = None,
    project: ProjectOption = Path("."),
    brand: BrandOption = None,
) -> None:
    """Emit custom properties for the palette and classes for each usecase."""
    from tincture.core.css_generator import generate_css

    ctx = _load_context(project, brand)
    css = generate_css(ctx)
    if output is None:
        typer.echo(css)
    else:
        output.write_text(css, encoding="utf-8")
        typer.echo(f"Wrote {len(ctx.palette)} colors to {output}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
