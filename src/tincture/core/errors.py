"""
Error types for tincture color registration, resolution, and validation.
"""

from dataclasses import dataclass
from typing import Optional


class TinctureError(Exception):
    """Base exception for all tincture errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message

    def __str__(self) -> str:
        return self._format_message()


class ConfigurationError(TinctureError):
    """
    Raised when a registration call receives malformed input.

    Examples:
    - Color value that is not a color
    - Name without a namespace
    - Empty property map for a usecase
    """

    pass


class InvalidProperty(ConfigurationError):
    """
    Raised when a usecase names a property outside
    background, border, text, and outline.
    """

    pass


class OverrideConflict(TinctureError):
    """
    Raised when a registration would silently redefine an existing entry.

    Examples:
    - Non-default namespace color registered twice with different values
    - Non-default namespace usecase re-registered with a changed configuration
    """

    pass


class NotFound(TinctureError, KeyError):
    """
    Raised when a color or usecase name does not exist.

    Examples:
    - Usecase referencing an unregistered color
    - Mix of a color name that was never set
    - Unknown usecase in a resolution preference list
    """

    pass


class ContrastError(TinctureError):
    """
    Raised when a synthesized text/background pair fails WCAG contrast.

    The ratio is below 3:1, so the pair is not legible even as large text.
    """

    def __init__(
        self,
        message: str,
        ratio: float,
        context: Optional["ErrorContext"] = None,
    ):
        self.ratio = ratio
        super().__init__(message, context)


class BrandSpecError(TinctureError):
    """Raised when a brandspec.yaml file cannot be read or validated."""

    pass


@dataclass
class ErrorContext:
    """
    Identifies the entry an error is about.

    Attributes:
        name: Color name involved, if any
        usecase: Usecase name involved, if any
        property: Usecase property involved, if any
    """

    name: str | None = None
    usecase: str | None = None
    property: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "usecase 'o-example/stripe' property 'text'"
        """
        parts: list[str] = []
        if self.usecase:
            parts.append(f"usecase '{self.usecase}'")
        if self.property:
            parts.append(f"property '{self.property}'")
        if self.name:
            parts.append(f"color '{self.name}'")
        return " ".join(parts)


def make_not_found(
    message: str,
    name: str | None = None,
    usecase: str | None = None,
    property: str | None = None,
) -> NotFound:
    """
    Helper to create a NotFound error with context.

    Args:
        message: Error description
        name: Missing color name
        usecase: Usecase that referenced it
        property: Usecase property that referenced it

    Returns:
        NotFound with context attached
    """
    if name or usecase or property:
        return NotFound(message, ErrorContext(name=name, usecase=usecase, property=property))
    return NotFound(message)
