# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, A002, TC003
"""Defaults command: print a spec with every default filled in."""

import sys
from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from pulsar_operator.cli._commands._context import CLIContext, OutputFormat
from pulsar_operator.cli._commands._shared import (
    ExitCode,
    format_json,
    format_toml,
    format_yaml,
)
from pulsar_operator.crds import (
    GlobalSpec,
    SpecLoadError,
    SpecValidationError,
    dump_global_spec,
    iter_defaulted_paths,
    load_global_spec,
)
from pulsar_operator.defaults import apply_global_spec_defaults

from ._app import app


def _load_or_empty(file: Path | None) -> GlobalSpec:
    """Load the spec from ``file``, or start from an empty spec.

    Raises:
        SystemExit: If the file cannot be loaded or does not match the schema.
    """
    if file is None:
        return GlobalSpec()
    try:
        return load_global_spec(file)
    except FileNotFoundError:
        print(f"Error: Spec file not found: {file}")
        raise SystemExit(ExitCode.NOT_FOUND) from None
    except SpecLoadError as e:
        print(f"Error: {e}")
        raise SystemExit(ExitCode.LOAD_ERROR) from None
    except SpecValidationError as e:
        print(f"Error: {e} (expected {e.expected})")
        raise SystemExit(ExitCode.VALIDATION_ERROR) from None


@app.command(name="defaults")
def _defaults(
    file: Path | None = None,
    /,
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = OutputFormat.YAML,
    explain: Annotated[
        bool,
        Parameter(name="--explain", help="List defaulted fields on stderr"),
    ] = False,
) -> None:
    """Print a spec with every default applied

    Reads the global section of FILE (a bare section or a full PulsarCluster
    resource) and prints it with all absent fields filled in. Without FILE,
    prints the defaults of an empty spec.

    Args:
        file: Spec document (YAML, JSON or TOML).
        format: Output format (yaml, json, toml).
        explain: List the paths of defaulted fields on stderr.
    """
    ctx = CLIContext.get_current()
    spec = _load_or_empty(file)

    apply_global_spec_defaults(spec, logger=ctx.logger)
    data = dump_global_spec(spec)

    match format:
        case OutputFormat.JSON:
            output = format_json(data)
        case OutputFormat.TOML:
            output = format_toml(data)
        case _:
            output = format_yaml(data)

    print(output.rstrip())

    if explain:
        for path in iter_defaulted_paths(spec):
            print(f"defaulted: {path}", file=sys.stderr)

    raise SystemExit(ExitCode.SUCCESS)
