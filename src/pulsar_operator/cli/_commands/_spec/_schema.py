# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, A002
"""Schema command: print the JSON Schema of the global section."""

from typing import Annotated

from cyclopts import Parameter

from pulsar_operator.cli._commands._context import OutputFormat
from pulsar_operator.cli._commands._shared import ExitCode, format_json, format_yaml
from pulsar_operator.crds import get_global_spec_schema

from ._app import app


@app.command(name="schema")
def _schema(
    format: Annotated[
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (json, yaml)"),
    ] = OutputFormat.JSON,
) -> None:
    """Print the JSON Schema of the global spec section

    Args:
        format: Output format (json, yaml).
    """
    schema = get_global_spec_schema()
    if format == OutputFormat.TOML:
        print("Error: TOML output is not supported for the schema")
        raise SystemExit(ExitCode.LOAD_ERROR)

    output = format_yaml(schema) if format == OutputFormat.YAML else format_json(schema)
    print(output.rstrip())
    raise SystemExit(ExitCode.SUCCESS)
