"""Pulsar operator exceptions."""

from pathlib import Path
from typing import Any


class PulsarOperatorError(Exception):
    """Base exception for pulsar operator errors."""


class SpecError(PulsarOperatorError):
    """Base exception for cluster spec errors."""


class SpecLoadError(SpecError):
    """Raised when a spec document cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class SpecValidationError(SpecError):
    """Raised when a spec document does not match the spec schema."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


class TemplateMismatchError(PulsarOperatorError, TypeError):
    """Raised when a default template does not have the live node's type.

    This signals a programming error in a template factory, never bad user
    input, so callers are not expected to recover from it.

    Attributes:
        live_type: Class of the node being defaulted.
        template_type: Class of the object the template supplier returned.
    """

    def __init__(
        self,
        message: str,
        *,
        live_type: type,
        template_type: type,
    ) -> None:
        """Initialize with error message and the mismatched types."""
        super().__init__(message)
        self.live_type: type = live_type
        self.template_type: type = template_type
