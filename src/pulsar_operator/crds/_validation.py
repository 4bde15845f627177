# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false, reportUnknownMemberType=false, reportUnknownVariableType=false
"""Spec validation support.

This module provides the ValidationIssue record, the ValidationContext that
validity hooks report into, and helpers that turn Pydantic errors raised
while parsing a spec document into issues and exceptions.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal

from pulsar_operator.exceptions import SpecValidationError

if TYPE_CHECKING:
    from pydantic import ValidationError
    from pydantic_core import ErrorDetails


# -----------------------------------------------------------------------------
# Validation Issue
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Represents a spec validation issue.

    Attributes:
        key: Dotted wire-name path to the field (e.g., "tls.enabled").
        message: Human-readable description of the issue.
        expected: Description of expected value or type, if available.
        actual: The actual value that caused the issue.
        source: Document the issue was found in, or None.
        severity: Whether this is an error or warning.
    """

    key: str
    message: str
    expected: str | None
    actual: Any
    source: str | None
    severity: Literal["error", "warning"]


@dataclass(slots=True)
class ValidationContext:
    """Collects issues reported by validity hooks.

    Attributes:
        source: Document being validated, attached to every issue.
        issues: Issues reported so far.
    """

    source: str | None = None
    issues: list[ValidationIssue] = field(default_factory=list)

    def add_issue(
        self,
        key: str,
        message: str,
        *,
        expected: str | None = None,
        actual: Any = None,
        severity: Literal["error", "warning"] = "error",
    ) -> None:
        """Record an issue against a field."""
        self.issues.append(
            ValidationIssue(
                key=key,
                message=message,
                expected=expected,
                actual=actual,
                source=self.source,
                severity=severity,
            )
        )

    @property
    def errors(self) -> list[ValidationIssue]:
        """Return the issues with error severity."""
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Return the issues with warning severity."""
        return [issue for issue in self.issues if issue.severity == "warning"]


# -----------------------------------------------------------------------------
# Pydantic Conversion
# -----------------------------------------------------------------------------


def _pydantic_error_to_issue(
    error: "ErrorDetails",  # noqa: UP037
    source: str | None,
) -> ValidationIssue:
    """Convert a Pydantic error dict to a ValidationIssue.

    Args:
        error: A single error dict from ValidationError.errors().
        source: The document name, or None.

    Returns:
        A ValidationIssue representing the validation error.
    """
    loc = error.get("loc", ())
    key = ".".join(str(part) for part in loc)

    message = str(error.get("msg", "Validation error"))

    ctx = error.get("ctx")
    expected: str | None = None
    if ctx is not None:
        if "expected" in ctx:
            expected = str(ctx["expected"])
        elif "pattern" in ctx:
            expected = f"pattern: {ctx['pattern']}"

    return ValidationIssue(
        key=key,
        message=message,
        expected=expected,
        actual=error.get("input"),
        source=source,
        severity="error",
    )


def issues_from_validation_error(
    error: "ValidationError",  # noqa: UP037
    *,
    source: str | None = None,
) -> list[ValidationIssue]:
    """Convert every error of a Pydantic ValidationError to a ValidationIssue.

    Args:
        error: The raised ValidationError.
        source: Document name attached to the issues.

    Returns:
        One issue per Pydantic error, in reporting order.
    """
    return [_pydantic_error_to_issue(err, source) for err in error.errors()]


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise SpecValidationError if any validation errors exist.

    Args:
        issues: List of ValidationIssue objects to check.
        source: Optional source string to use in the exception.
            If not provided, uses the source from the first error.

    Raises:
        SpecValidationError: If any issues have severity="error".
    """
    errors = [i for i in issues if i.severity == "error"]
    if errors:
        issue = errors[0]
        msg = f"Invalid spec value for '{issue.key}'"
        raise SpecValidationError(
            msg,
            key=issue.key,
            value=issue.actual,
            expected=issue.expected or issue.message,
            source=source or issue.source,
        )
