"""pulsar-operator CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._context import CLIContext, OutputFormat
from ._shared import (
    ExitCode,
    FormattableData,
    format_json,
    format_toml,
    format_yaml,
)
from ._spec import app as spec_app

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "CLIContext",
    "ExitCode",
    "FormattableData",
    "OutputFormat",
    "format_json",
    "format_toml",
    "format_yaml",
    "register_commands",
    "spec_app",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(spec_app)
