# topmark:header:start
#
#   project      : Printable
#   file         : main.py
#   file_relpath : src/printable/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable CLI entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj``; subcommands read the shared console and verbosity from there.
"""

from __future__ import annotations

import click

from printable.cli.commands.render import render_command
from printable.cli.commands.version import version_command
from printable.cli.console import Console
from printable.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from printable.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = Console(enable_color=not no_color)
    logger.debug(
        "CLI state: verbosity=%s log_level=%s color=%s",
        ctx.obj["verbosity_level"],
        level_env,
        ctx.color,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Printable CLI: render items as '[item, item, ...]'.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the Printable CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: Console = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'printable render ITEMS...' to render items.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
