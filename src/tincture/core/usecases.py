"""
Usecase registry.

A usecase names a semantic role ("page", "link", "o-example/stripe") and maps
some of the properties background, border, text and outline to colors.
Usecases in the default namespace are extended incrementally; any other
namespace registers a usecase once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from .algebra import parse_color
from .errors import (
    ConfigurationError,
    ErrorContext,
    InvalidProperty,
    OverrideConflict,
    make_not_found,
)
from .ir.registry import ColorRef, Property, UsecaseEntry, UsecaseOptions
from .names import QualifiedName, parse_name
from .palette import PaletteStore

logger = logging.getLogger(__name__)

_VALID_PROPERTIES = ", ".join(p.value for p in Property)


def _merge_options(existing: UsecaseOptions, new: UsecaseOptions | None) -> UsecaseOptions:
    if new is None:
        return existing
    return UsecaseOptions(
        deprecated=new.deprecated if new.deprecated is not None else existing.deprecated,
        deprecated_properties={**existing.deprecated_properties, **new.deprecated_properties},
    )


class UsecaseStore:
    """Registry of usecases whose color references are checked against a palette."""

    def __init__(self, palette: PaletteStore) -> None:
        self.palette = palette
        self._entries: dict[str, UsecaseEntry] = {}

    def _normalize(
        self,
        usecase: QualifiedName,
        colors_by_property: Mapping[str, ColorRef],
    ) -> dict[Property, ColorRef]:
        """Validate a property map without touching the registry."""
        if not isinstance(colors_by_property, Mapping) or not colors_by_property:
            raise ConfigurationError(
                "expected a non-empty mapping of property to color",
                ErrorContext(usecase=usecase.full),
            )

        colors: dict[Property, ColorRef] = {}
        for key, ref in colors_by_property.items():
            try:
                prop = Property(key)
            except ValueError:
                raise InvalidProperty(
                    f"unknown property, expected one of: {_VALID_PROPERTIES}",
                    ErrorContext(usecase=usecase.full, property=str(key)),
                ) from None

            try:
                literal = parse_color(ref)
            except ConfigurationError as e:
                raise ConfigurationError(
                    e.message, ErrorContext(usecase=usecase.full, property=prop.value)
                ) from e

            if literal is not None:
                colors[prop] = literal
            elif self.palette.exists(ref):
                colors[prop] = ref
            else:
                raise make_not_found(
                    "color does not exist in the palette",
                    name=str(ref),
                    usecase=usecase.full,
                    property=prop.value,
                )
        return colors

    def set_usecase(
        self,
        name: str,
        colors_by_property: Mapping[str, ColorRef],
        options: UsecaseOptions | None = None,
    ) -> UsecaseEntry:
        """Register or extend a usecase.

        Args:
            name: Namespaced usecase name.
            colors_by_property: Property -> color literal or palette name.
            options: Whole-usecase and per-property deprecation messages.

        Returns:
            The stored entry.

        Raises:
            ConfigurationError: If the name is not namespaced or the map is empty.
            InvalidProperty: If a key is not a usecase property.
            NotFound: If a referenced color is not in the palette.
            OverrideConflict: If a non-default namespace usecase would change.
        """
        qualified = parse_name(name)
        colors = self._normalize(qualified, colors_by_property)

        existing = self._entries.get(qualified.key)
        if existing is None:
            entry = UsecaseEntry(name=qualified, colors=colors, options=options or UsecaseOptions())
        else:
            entry = UsecaseEntry(
                name=qualified,
                colors={**existing.colors, **colors},
                options=_merge_options(existing.options, options),
            )
            if entry == existing:
                logger.debug("Usecase %s already registered with the same colors", qualified)
                return existing
            if not qualified.is_default:
                raise OverrideConflict(
                    "already registered with a different configuration",
                    ErrorContext(usecase=qualified.full),
                )

        self._entries[qualified.key] = entry
        logger.debug(
            "Registered usecase %s: %s",
            qualified,
            ", ".join(p.value for p in entry.colors),
        )
        return entry

    def get_usecase(self, name: str) -> UsecaseEntry | None:
        try:
            key = parse_name(name, require_namespace=False).key
        except ConfigurationError:
            return None
        return self._entries.get(key)

    def exists(self, name: str) -> bool:
        return self.get_usecase(name) is not None

    def entries(self) -> Iterator[UsecaseEntry]:
        """Iterate entries in registration order."""
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"UsecaseStore(usecases={len(self._entries)})"
