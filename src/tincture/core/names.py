"""
Namespaced entry names.

Every color and usecase is identified by ``"<namespace>/<identifier>"``.
Entries in the default namespace are stored under their bare identifier,
so ``"teal"`` and ``"o-colors/teal"`` address the same built-in color.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .errors import ConfigurationError

DEFAULT_NAMESPACE = "o-colors"

_SEPARATOR = "/"


class QualifiedName(BaseModel):
    """Parsed form of a namespaced name."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    identifier: str

    @property
    def is_default(self) -> bool:
        return self.namespace == DEFAULT_NAMESPACE

    @property
    def key(self) -> str:
        """Registry key: bare identifier for built-ins, full name otherwise."""
        if self.is_default:
            return self.identifier
        return f"{self.namespace}{_SEPARATOR}{self.identifier}"

    @property
    def full(self) -> str:
        return f"{self.namespace}{_SEPARATOR}{self.identifier}"

    def __str__(self) -> str:
        return self.full


def parse_name(name: str, *, require_namespace: bool = True) -> QualifiedName:
    """Parse a namespaced name.

    Args:
        name: Name such as ``"o-colors/teal"`` or ``"o-example/stripe"``.
        require_namespace: When False, a bare identifier is taken to be in
            the default namespace (used for lookups).

    Returns:
        QualifiedName for the name.

    Raises:
        ConfigurationError: If the name is empty, not a string, or its
            namespace cannot be determined.
    """
    if not isinstance(name, str) or not name.strip():
        raise ConfigurationError(f"Expected a non-empty name, got {name!r}")

    namespace, sep, identifier = name.strip().rpartition(_SEPARATOR)
    if not sep:
        if require_namespace:
            raise ConfigurationError(
                f"Name '{name}' has no namespace; expected '<namespace>/<identifier>'"
            )
        return QualifiedName(namespace=DEFAULT_NAMESPACE, identifier=identifier)

    if not namespace or not identifier:
        raise ConfigurationError(
            f"Could not determine namespace of '{name}'; expected '<namespace>/<identifier>'"
        )
    return QualifiedName(namespace=namespace, identifier=identifier)
