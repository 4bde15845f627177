"""Shared utilities."""

from ._logging import LogFormatType, create_cli_logger, create_engine_logger

__all__ = ["LogFormatType", "create_cli_logger", "create_engine_logger"]
