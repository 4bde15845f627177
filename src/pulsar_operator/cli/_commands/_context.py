"""CLI context for global state management.

The CLIContext is set once at CLI startup and made available to all commands
via contextvars.
"""

import contextvars
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


class OutputFormat(StrEnum):
    """Supported output formats for commands."""

    YAML = "yaml"
    JSON = "json"
    TOML = "toml"


_current_cli_context: contextvars.ContextVar["CLIContext | None"] = (
    contextvars.ContextVar("cli_context", default=None)
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI options shared with every command.

    Attributes:
        verbose: Enable verbose output with additional details.
        quiet: Suppress non-essential output.
        logger: Structured logger for CLI commands, or None when the CLI was
            invoked without global options.
    """

    verbose: bool = False
    quiet: bool = False
    logger: "FilteringBoundLogger | None" = field(default=None, repr=False)  # noqa: UP037

    @classmethod
    def get_current(cls) -> "CLIContext":  # noqa: UP037
        """Get current active CLIContext, or a default if none is set."""
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls()

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:  # noqa: UP037
        """Set the current active CLIContext."""
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)
