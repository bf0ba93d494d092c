"""nodetext CLI - turn code graph nodes into embedding text."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv

# Load .env file so NODETEXT_* settings can live there
load_dotenv()

import click  # noqa: E402

from nodetext import __version__  # noqa: E402
from nodetext.commands.init_cmd import init  # noqa: E402
from nodetext.commands.render import render  # noqa: E402

if TYPE_CHECKING:
    from nodetext.config import NodeTextConfig
    from nodetext.logging import Verbosity


class NodeTextContext:
    """Shared context for CLI commands."""

    def __init__(self) -> None:
        self.config: NodeTextConfig | None = None
        self.verbosity: Verbosity = "normal"
        self.debug: bool = False


pass_context = click.make_pass_decorator(NodeTextContext, ensure=True)

# Commands that run without a valid configuration
CONFIG_FREE_COMMANDS = {"init"}


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output")
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(version=__version__, prog_name="nodetext")
@pass_context
def cli(
    ctx: NodeTextContext,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """nodetext - Embedding text for code graph nodes.

    \b
    Commands:
      render       Generate embedding text for nodes in a JSON/JSONL file
      init         Write a default .nodetextrc.toml

    Use 'nodetext <command> --help' for details.
    Use --debug to show full tracebacks on errors.
    """
    import sys

    from nodetext.config import NodeTextConfig
    from nodetext.errors import ConfigError
    from nodetext.logging import print_error, setup_logging

    ctx.debug = debug

    if quiet:
        ctx.verbosity = "quiet"
    elif verbose:
        ctx.verbosity = "verbose"
    else:
        ctx.verbosity = "normal"

    setup_logging(ctx.verbosity)

    try:
        ctx.config = NodeTextConfig.load(config)
    except ConfigError as e:
        if click.get_current_context().invoked_subcommand in CONFIG_FREE_COMMANDS:
            return
        if debug:
            raise
        print_error(e.message)
        sys.exit(e.exit_code)


cli.add_command(render)
cli.add_command(init)


def main() -> None:
    """Entry point for the CLI."""
    import sys

    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
