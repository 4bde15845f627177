# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# pyright: reportExplicitAny=false, reportAny=false
# ruff: noqa: D415, A002, TC003
"""Validate command for cluster spec documents."""

from pathlib import Path
from typing import Annotated, Any

from cyclopts import Parameter
from pydantic import ValidationError

from pulsar_operator.cli._commands._context import CLIContext, OutputFormat
from pulsar_operator.cli._commands._shared import ExitCode, format_json
from pulsar_operator.crds import (
    GlobalSpec,
    SpecLoadError,
    ValidationContext,
    ValidationIssue,
    extract_global_section,
    issues_from_validation_error,
    read_spec_file,
)
from pulsar_operator.defaults import apply_global_spec_defaults

from ._app import app

# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def _issue_to_dict(issue: ValidationIssue) -> dict[str, Any]:
    return {
        "severity": issue.severity,
        "key": issue.key,
        "message": issue.message,
        "expected": issue.expected,
        "actual": issue.actual,
    }


def _format_text_output(source: str, issues: list[ValidationIssue]) -> str:
    """Format validation results as human-readable text.

    Args:
        source: Name of the validated document.
        issues: Issues found, in reporting order.

    Returns:
        One line per issue, or a single success line.
    """
    if not issues:
        return f"{source}: valid"

    lines = [f"{source}: {len(issues)} issue(s)"]
    for issue in issues:
        line = f"  {issue.severity}: {issue.key or '<root>'}: {issue.message}"
        if issue.expected:
            line += f" (expected {issue.expected})"
        lines.append(line)
    return "\n".join(lines)


def _validate_file(file: Path) -> tuple[bool, list[ValidationIssue]]:
    """Parse, resolve and run the validity hook on a spec document.

    Returns:
        Tuple of (hook verdict, issues). The verdict is False when the
        document does not even parse into a spec.

    Raises:
        FileNotFoundError: If the file does not exist.
        SpecLoadError: If the file cannot be parsed.
    """
    source = str(file)
    section = extract_global_section(read_spec_file(file))
    try:
        spec = GlobalSpec.model_validate(section)
    except ValidationError as e:
        return False, issues_from_validation_error(e, source=source)

    apply_global_spec_defaults(spec, logger=CLIContext.get_current().logger)

    context = ValidationContext(source=source)
    valid = spec.is_valid(context)
    return valid and not context.errors, context.issues


# -----------------------------------------------------------------------------
# Command
# -----------------------------------------------------------------------------


@app.command(name="validate")
def _validate(
    file: Path,
    /,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (yaml is text)"),
    ] = OutputFormat.YAML,
) -> None:
    """Validate a spec document

    Parses the global section of FILE, applies defaults and runs the spec
    validity hook.

    Exit codes:
        0 - The spec is valid
        1 - The file could not be read or parsed
        2 - The spec is invalid
        3 - The file does not exist

    Args:
        file: Spec document (YAML, JSON or TOML).
        format: Output format (json for machine-readable output).
    """
    try:
        valid, issues = _validate_file(file)
    except FileNotFoundError:
        print(f"Error: Spec file not found: {file}")
        raise SystemExit(ExitCode.NOT_FOUND) from None
    except SpecLoadError as e:
        print(f"Error: {e}")
        raise SystemExit(ExitCode.LOAD_ERROR) from None

    if format == OutputFormat.JSON:
        output = format_json(
            {
                "source": str(file),
                "valid": valid,
                "issues": [_issue_to_dict(issue) for issue in issues],
            }
        )
    else:
        output = _format_text_output(str(file), issues)

    print(output)
    raise SystemExit(ExitCode.SUCCESS if valid else ExitCode.VALIDATION_ERROR)
