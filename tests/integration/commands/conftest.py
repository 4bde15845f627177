from collections.abc import Callable, Generator

import pytest
from rich.console import Console

from pulsar_operator.cli import create_app
from pulsar_operator.cli._commands._context import CLIContext


@pytest.fixture(autouse=True)
def _reset_cli_context() -> Generator[None]:  # pyright: ignore[reportUnusedFunction]
    CLIContext.reset()
    yield
    CLIContext.reset()


@pytest.fixture
def pulsar_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code.

    Commands run without the global options layer, so no logger is set.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run


@pytest.fixture
def pulsar_meta_cli_with_exit_code(console: Console) -> Callable[..., int]:
    """Create CLI app that runs through the global options layer."""

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app.meta(args)
        except SystemExit as e:
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
