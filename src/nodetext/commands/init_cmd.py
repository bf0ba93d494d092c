"""nodetext init command - Write a default .nodetextrc.toml."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from nodetext.cli import NodeTextContext


@click.command()
@click.argument(
    "path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing .nodetextrc.toml")
@click.pass_obj
def init(ctx: NodeTextContext, path: Path, force: bool) -> None:
    """Initialize a .nodetextrc.toml configuration file.

    Creates a configuration file with the default snippet budget and
    embedding model settings in PATH (default: current directory).
    """
    from nodetext.config import get_default_config_toml
    from nodetext.errors import ExitCode
    from nodetext.logging import print_error, print_info, print_success, print_warning
    from nodetext.paths import CONFIG_FILE

    config_path = path / CONFIG_FILE

    if config_path.exists() and not force:
        print_warning(f"Configuration file already exists: {config_path}")
        print_info("Use --force to overwrite")
        sys.exit(ExitCode.CONFIG_ERROR)

    try:
        config_path.write_text(get_default_config_toml())
    except PermissionError:
        print_error(f"Permission denied: {config_path}")
        sys.exit(ExitCode.CONFIG_ERROR)

    print_success(f"Created {config_path}")


__all__ = ["init"]
