"""
Palette registry.

Stores named color entries for one build. Built-in colors live in the
default namespace and may be customized; colors registered by other
namespaces can be set once and never silently redefined.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .algebra import parse_color
from .errors import ConfigurationError, ErrorContext, OverrideConflict, make_not_found
from .ir.colors import Color, ColorValue, format_color_value
from .ir.registry import ColorEntry, ColorOptions
from .names import parse_name

logger = logging.getLogger(__name__)


class PaletteStore:
    """Registry of named colors, keyed by stripped name."""

    def __init__(self) -> None:
        self._entries: dict[str, ColorEntry] = {}

    def set_color(
        self,
        name: str,
        value: Color | str,
        options: ColorOptions | None = None,
    ) -> ColorEntry:
        """Register a color.

        Args:
            name: Namespaced name, e.g. ``"o-example/brand"``.
            value: Color, color literal, or sentinel.
            options: Deprecation message and tone permission.

        Returns:
            The stored entry (the existing one for idempotent re-registration).

        Raises:
            ConfigurationError: If the name is not namespaced or the value is
                not a color.
            OverrideConflict: If a non-default namespace color is redefined
                with a different value.
        """
        qualified = parse_name(name)
        color = parse_color(value)
        if color is None:
            raise ConfigurationError(
                f"Expected a color value, got {value!r}", ErrorContext(name=name)
            )
        options = options or ColorOptions()

        existing = self._entries.get(qualified.key)
        if existing is not None:
            if existing.value == color:
                logger.debug("Color %s already registered with the same value", qualified)
                return existing
            if not qualified.is_default:
                raise OverrideConflict(
                    f"already set to {format_color_value(existing.value)}, "
                    f"refusing to change it to {format_color_value(color)}",
                    ErrorContext(name=qualified.full),
                )
            logger.info(
                "Overriding built-in color %s: %s -> %s",
                qualified.identifier,
                format_color_value(existing.value),
                format_color_value(color),
            )

        entry = ColorEntry(
            name=qualified,
            value=color,
            deprecated=options.deprecated,
            allow_tones=options.allow_tones,
        )
        self._entries[qualified.key] = entry
        logger.debug("Registered color %s = %s", qualified, format_color_value(color))
        return entry

    def get_entry(self, name: str) -> ColorEntry:
        """Return the entry for ``name``.

        Raises:
            NotFound: If no such color is registered.
        """
        key = parse_name(name, require_namespace=False).key
        entry = self._entries.get(key)
        if entry is None:
            raise make_not_found("color does not exist in the palette", name=name)
        return entry

    def get_by_name(self, name: str) -> ColorValue:
        """Return the value of ``name``, warning when it is deprecated.

        Raises:
            NotFound: If no such color is registered.
        """
        entry = self.get_entry(name)
        if entry.deprecated:
            logger.warning("Color '%s' is deprecated: %s", name, entry.deprecated)
        return entry.value

    def exists(self, name: str) -> bool:
        try:
            key = parse_name(name, require_namespace=False).key
        except ConfigurationError:
            return False
        return key in self._entries

    def entries(self) -> Iterator[ColorEntry]:
        """Iterate entries in registration order."""
        return iter(list(self._entries.values()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PaletteStore(colors={len(self._entries)})"
