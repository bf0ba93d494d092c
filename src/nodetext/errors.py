"""Error handling framework for nodetext.

The text pipeline itself never raises for a well-formed node. These errors
cover the boundaries: loading configuration and turning upstream records
into nodes.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class ExitCode(IntEnum):
    """nodetext CLI exit codes."""

    SUCCESS = 0
    CONFIG_ERROR = 1  # Configuration error (user fixable)
    INPUT_ERROR = 2  # Malformed node records
    FATAL_ERROR = 3  # Unexpected crash


class NodeTextError(Exception):
    """Base exception for nodetext errors."""

    exit_code: ExitCode = ExitCode.FATAL_ERROR

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for JSON output."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "exit_code": self.exit_code,
            **self.context,
        }


class ConfigError(NodeTextError):
    """Configuration-related errors."""

    exit_code = ExitCode.CONFIG_ERROR


class NodeFormatError(NodeTextError):
    """A node record from upstream is missing fields or has the wrong shape."""

    exit_code = ExitCode.INPUT_ERROR

    def __init__(self, message: str, index: int | None = None, **context: Any):
        super().__init__(message, index=index, **context)
        self.index = index


__all__ = [
    "ExitCode",
    "NodeTextError",
    "ConfigError",
    "NodeFormatError",
]
