"""
Usecase resolution.

Resolves an ordered list of usecases into concrete colors:
1. The first usecase in the list that defines the property wins
2. Its color reference is looked up in the palette
3. With no match, the caller's default (or transparent) is returned

``resolve_for`` additionally derives a text color from the background
when none of the usecases defines text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .algebra import BLACK, WHITE, mix, parse_color, resolve_color
from .contrast import is_light, validate_contrast
from .errors import ConfigurationError, InvalidProperty, make_not_found
from .ir.colors import Color, ColorValue, Sentinel
from .ir.registry import (
    ALL_PROPERTIES,
    COLOR_PROPERTIES,
    ColorRef,
    Property,
    ResolvedColor,
    ResolvedColorSet,
    ResolveOptions,
    UsecaseEntry,
)
from .palette import PaletteStore
from .usecases import UsecaseStore

logger = logging.getLogger(__name__)

DEFAULT_TEXT_OPACITY = 100


def _preference_list(preference: str | Sequence[str]) -> list[str]:
    if isinstance(preference, str):
        return [preference]
    return list(preference)


def _to_property(value: str) -> Property:
    try:
        return Property(value)
    except ValueError:
        raise InvalidProperty(
            f"unknown property '{value}', expected one of: "
            f"{', '.join(p.value for p in Property)} or '{ALL_PROPERTIES}'"
        ) from None


def _lookup(usecases: UsecaseStore, name: str) -> UsecaseEntry:
    entry = usecases.get_usecase(name)
    if entry is None:
        raise make_not_found("usecase does not exist", usecase=name)
    return entry


def _resolve_ref(palette: PaletteStore, ref: ColorRef) -> ColorValue:
    literal = parse_color(ref)
    if literal is not None:
        return literal
    return palette.get_by_name(str(ref))


def _warn_deprecated(
    entry: UsecaseEntry,
    prop: Property,
    warnings: list[str] | None,
) -> None:
    message = entry.deprecation_for(prop)
    if not message:
        return
    text = f"Usecase '{entry.name.key}' ({prop.value}) is deprecated: {message}"
    logger.warning(text)
    if warnings is not None:
        warnings.append(text)


def _resolved(
    palette: PaletteStore,
    entry: UsecaseEntry,
    prop: Property,
    warnings: list[str] | None,
) -> ResolvedColor:
    _warn_deprecated(entry, prop, warnings)
    return ResolvedColor(
        value=_resolve_ref(palette, entry.colors[prop]),
        property=prop,
        usecase=entry.name.key,
    )


def resolve_property(
    usecases: UsecaseStore,
    preference: str | Sequence[str],
    prop: Property,
    options: ResolveOptions | None = None,
    warnings: list[str] | None = None,
) -> ResolvedColor:
    """Resolve a single property; the first usecase defining it wins."""
    names = _preference_list(preference)
    for name in names:
        entry = _lookup(usecases, name)
        if entry.defines(prop):
            logger.debug("Usecase %s satisfies '%s'", name, prop.value)
            return _resolved(usecases.palette, entry, prop, warnings)

    default = _default_value(usecases.palette, options)
    logger.debug("No usecase in %s defines '%s', using %s", names, prop.value, default)
    return ResolvedColor(value=default, property=prop)


def _resolve_all(
    usecases: UsecaseStore,
    preference: str | Sequence[str],
    options: ResolveOptions | None,
    warnings: list[str] | None,
) -> ResolvedColorSet:
    names = _preference_list(preference)
    for name in names:
        entry = _lookup(usecases, name)
        defined = [p for p in COLOR_PROPERTIES if entry.defines(p)]
        if defined:
            logger.debug("Usecase %s satisfies 'all' (%s)", name, defined)
            return ResolvedColorSet(
                usecase=entry.name.key,
                **{p.value: _resolved(usecases.palette, entry, p, warnings) for p in defined},
            )

    default = _default_value(usecases.palette, options)
    logger.debug("No usecase in %s defines any color, using %s", names, default)
    return ResolvedColorSet(
        **{p.value: ResolvedColor(value=default, property=p) for p in COLOR_PROPERTIES}
    )


def resolve_color_for(
    usecases: UsecaseStore,
    preference: str | Sequence[str],
    property: str,
    options: ResolveOptions | None = None,
    warnings: list[str] | None = None,
) -> ResolvedColor | ResolvedColorSet:
    """Resolve one property (or ``"all"``) from an ordered list of usecases.

    Args:
        usecases: Usecase registry; its palette resolves color names.
        preference: Usecase name or ordered list of names, most preferred first.
        property: ``background``, ``border``, ``text``, ``outline`` or ``all``.
        options: ``default`` returned when no usecase matches.
        warnings: Optional list collecting deprecation warnings.

    Returns:
        ResolvedColor for a single property. ResolvedColorSet for ``all``,
        holding whichever of background, border and text the first usecase
        defining any of them has.

    Raises:
        NotFound: If a usecase in the list does not exist.
        InvalidProperty: If ``property`` is not a usecase property.
    """
    if property == ALL_PROPERTIES:
        return _resolve_all(usecases, preference, options, warnings)
    return resolve_property(usecases, preference, _to_property(property), options, warnings)


def _default_value(palette: PaletteStore, options: ResolveOptions | None) -> ColorValue:
    if options is None or options.default is None:
        return Sentinel.TRANSPARENT
    return _resolve_ref(palette, options.default)


def get_text_color(
    background: Color | str,
    opacity: float = DEFAULT_TEXT_OPACITY,
    palette: PaletteStore | None = None,
    warnings: list[str] | None = None,
) -> Color:
    """Derive a legible text color for ``background``.

    Black is used on light backgrounds and white on dark ones, blended over
    the background at ``opacity`` to approximate translucent text.

    Args:
        background: Background color, literal, or palette name.
        opacity: Opacity of the text (0-100).
        palette: Palette used to look up names.
        warnings: Optional list collecting large-text-only contrast warnings.

    Returns:
        The text color.

    Raises:
        ContrastError: If the result fails WCAG contrast against the background.
    """
    if not 0 <= opacity <= 100:
        raise ConfigurationError(f"Text opacity must be between 0 and 100, got {opacity}")
    bg = resolve_color(background, palette)
    base = BLACK if is_light(bg) else WHITE
    text = mix(base, bg, opacity)
    validate_contrast(bg, text, warnings)
    return text


def resolve_for(
    usecases: UsecaseStore,
    preference: str | Sequence[str],
    properties: str | Sequence[str] | None = None,
    text_opacity: float | None = None,
    warnings: list[str] | None = None,
) -> dict[Property, ResolvedColor]:
    """Resolve several properties, deriving text from the background if needed.

    Args:
        usecases: Usecase registry.
        preference: Usecase name or ordered list of names.
        properties: Properties to resolve; defaults to background, border, text.
        text_opacity: Opacity for derived text (0-100, default 100).
        warnings: Optional list collecting non-fatal warnings.

    Returns:
        Mapping of property to resolved color. Properties no usecase defines
        (and that could not be derived) are omitted.
    """
    if properties is None or properties == ALL_PROPERTIES:
        props = list(COLOR_PROPERTIES)
    else:
        props = [_to_property(p) for p in _preference_list(properties)]

    no_match = ResolveOptions(default=Sentinel.UNDEFINED)
    result: dict[Property, ResolvedColor] = {}
    for prop in props:
        resolved = resolve_property(usecases, preference, prop, no_match, warnings)
        if resolved.usecase is not None:
            result[prop] = resolved

    if Property.TEXT in props and Property.TEXT not in result:
        background = result.get(Property.BACKGROUND)
        if background is None:
            found = resolve_property(usecases, preference, Property.BACKGROUND, no_match, warnings)
            background = found if found.usecase is not None else None

        if background is not None and isinstance(background.value, Color):
            opacity = DEFAULT_TEXT_OPACITY if text_opacity is None else text_opacity
            text = get_text_color(background.value, opacity, warnings=warnings)
            logger.debug(
                "Derived text %s for %s background %s", text, background.usecase, background.value
            )
            result[Property.TEXT] = ResolvedColor(
                value=text,
                property=Property.TEXT,
                usecase=background.usecase,
                synthesized=True,
            )

    return {prop: result[prop] for prop in props if prop in result}
