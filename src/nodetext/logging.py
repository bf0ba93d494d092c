"""Logging configuration for nodetext."""

from __future__ import annotations

import logging
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Messages go to stderr; stdout carries rendered documents
err_console = Console(stderr=True)

Verbosity = Literal["quiet", "normal", "verbose"]


def setup_logging(verbosity: Verbosity = "normal") -> logging.Logger:
    """Configure logging based on verbosity level."""
    logger = logging.getLogger("nodetext")

    # Clear existing handlers
    logger.handlers.clear()

    level_map = {
        "quiet": logging.ERROR,
        "normal": logging.INFO,
        "verbose": logging.DEBUG,
    }
    logger.setLevel(level_map[verbosity])

    # Logs go to stderr so rendered documents on stdout stay clean
    handler = RichHandler(
        console=err_console,
        show_time=verbosity == "verbose",
        show_path=verbosity == "verbose",
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message to stderr."""
    err_console.print(f"[green]{escape(message)}[/green]")


def print_info(message: str) -> None:
    """Print an info message to stderr."""
    err_console.print(escape(message))
