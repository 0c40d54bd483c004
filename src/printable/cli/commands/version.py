# topmark:header:start
#
#   project      : Printable
#   file         : version.py
#   file_relpath : src/printable/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable `version` command.

Prints the Printable version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from printable.cli.cli_types import EnumChoiceParam, OutputFormat
from printable.constants import PRINTABLE_VERSION

if TYPE_CHECKING:
    from printable.cli.console import Console


@click.command(
    name="version",
    help="Show the current version of Printable.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Printable.

    Args:
        output_format (OutputFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: Console = ctx.obj["console"]
    verbose: bool = ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": PRINTABLE_VERSION}))
    elif verbose:
        console.print(console.styled("Printable version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PRINTABLE_VERSION, bold=True)}")
    else:
        console.print(console.styled(PRINTABLE_VERSION, bold=True))
