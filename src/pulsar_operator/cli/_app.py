"""The command-line interface for the pulsar operator spec tools."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from pulsar_operator.utils import LogFormatType, create_cli_logger

from ._commands import register_commands
from ._commands._context import CLIContext

_HELP = "Resolve and validate Pulsar cluster specs."


def _effective_level(log_level: str, *, verbose: bool, quiet: bool) -> str:
    if verbose:
        return "debug"
    if quiet:
        return "error"
    return log_level


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="pulsar-operator",
        help=_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable verbose output")] = False,
        quiet: Annotated[bool, Parameter(help="Suppress non-essential output")] = False,
        log_level: Annotated[
            str, Parameter(name="--log-level", help="Log level threshold")
        ] = "warning",
        log_format: Annotated[
            LogFormatType, Parameter(name="--log-format", help="Log output format")
        ] = "text",
        log_file: Annotated[
            Path | None, Parameter(name="--log-file", help="Write logs to this file")
        ] = None,
    ) -> None:
        """Launch the CLI with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable verbose output with additional details.
            quiet: Suppress non-essential output.
            log_level: Log level threshold (debug, info, warning, error).
            log_format: Log output format (json, text).
            log_file: Log file path; logs go to stderr when omitted.
        """
        cli_logger = create_cli_logger(
            level=_effective_level(log_level, verbose=verbose, quiet=quiet),
            log_format=log_format,
            log_file=str(log_file) if log_file is not None else "",
        )

        ctx = CLIContext(
            verbose=verbose,
            quiet=quiet,
            logger=cli_logger,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `pulsar-operator` CLI."""
    app.meta()


if __name__ == "__main__":
    main()
