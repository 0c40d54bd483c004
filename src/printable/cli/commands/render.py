# topmark:header:start
#
#   project      : Printable
#   file         : render.py
#   file_relpath : src/printable/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable `render` command.

Renders the given items (or newline-delimited items read from STDIN) as a
printable view, using the style resolved from configuration files and flags.

Examples:
    ```bash
    printable render a b c                 # [a, b, c]
    printable render -s . 1 2 3            # [1.2.3]
    printf 'x\\ny\\n' | printable render -   # [x, y]
    ```
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

from printable.cli.errors import (
    PrintableConfigError,
    PrintableFileNotFoundError,
    PrintableIOError,
    PrintableUsageError,
)
from printable.cli.options import style_options
from printable.config.keys import Toml
from printable.config.loaders import ConfigFileError, resolve_style
from printable.config.logging import get_logger
from printable.constants import STDIN_ITEM_MARKER
from printable.style import StyleValueError
from printable.view import wrap

if TYPE_CHECKING:
    from printable.cli.console import Console
    from printable.config.logging import PrintableLogger
    from printable.style import RenderStyle

logger: PrintableLogger = get_logger(__name__)


def collect_items(items: tuple[str, ...], stdin_text: str | None = None) -> list[str]:
    """Return the items to render, expanding the STDIN marker.

    A single ``-`` is replaced, in place, by the lines read from STDIN. With no
    items at all, STDIN is read unless it is an interactive terminal.

    Args:
        items: Positional arguments as given on the command line.
        stdin_text: Optional pre-read STDIN content, used instead of reading the stream.

    Returns:
        The items in render order.

    Raises:
        PrintableUsageError: If ``-`` is given more than once.
    """
    if items.count(STDIN_ITEM_MARKER) > 1:
        raise PrintableUsageError("STDIN ('-') may be given at most once.")
    if items and STDIN_ITEM_MARKER not in items:
        return list(items)

    if stdin_text is None:
        stream = click.get_text_stream("stdin")
        if not items and stream.isatty():
            return []
        stdin_text = stream.read()
    lines: list[str] = stdin_text.splitlines()
    logger.debug("Read %d item(s) from STDIN", len(lines))

    if not items:
        return lines
    idx: int = items.index(STDIN_ITEM_MARKER)
    return [*items[:idx], *lines, *items[idx + 1 :]]


def resolve_command_style(
    *,
    config_files: tuple[str, ...],
    no_config: bool,
    overrides: dict[str, str | None],
) -> RenderStyle:
    """Resolve the style for this invocation, translating failures to CLI errors."""
    paths: list[Path] = [Path(p) for p in config_files]
    for path in paths:
        if not path.exists():
            raise PrintableFileNotFoundError(f"Config file not found: {path}")
    try:
        return resolve_style(
            cwd=None if no_config else Path.cwd(),
            config_files=paths,
            overrides=overrides,
        )
    except ConfigFileError as exc:
        raise PrintableConfigError(str(exc)) from exc
    except StyleValueError as exc:
        raise PrintableConfigError(str(exc)) from exc


@click.command(
    name="render",
    help="Render ITEMS as '[item, item, ...]'. Use '-' to read newline-delimited items from STDIN.",
)
@click.argument("items", nargs=-1, type=str)
@style_options
@click.option(
    "--format-spec",
    "format_spec",
    type=str,
    default="",
    help="Format specification applied to every item, e.g. '>5' or '^7'.",
)
def render_command(
    *,
    items: tuple[str, ...],
    separator: str | None,
    left_bound: str | None,
    right_bound: str | None,
    config_files: tuple[str, ...],
    no_config: bool,
    format_spec: str,
) -> None:
    """Render the items to standard output.

    Args:
        items (tuple[str, ...]): Items to render; ``-`` reads items from STDIN.
        separator (str | None): Separator override.
        left_bound (str | None): Left bound override.
        right_bound (str | None): Right bound override.
        config_files (tuple[str, ...]): Explicit config files.
        no_config (bool): Skip config discovery in the working directory.
        format_spec (str): Format specification applied to every item.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: Console = ctx.obj["console"]

    style = resolve_command_style(
        config_files=config_files,
        no_config=no_config,
        overrides={
            Toml.KEY_SEPARATOR: separator,
            Toml.KEY_LEFT_BOUND: left_bound,
            Toml.KEY_RIGHT_BOUND: right_bound,
        },
    )
    values: list[str] = collect_items(items)

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.warn(console.styled(f"Style: {style.to_dict()}", dim=True))

    view = style.apply(wrap(values))
    try:
        text: str = format(view, format_spec)
    except ValueError as exc:
        raise PrintableUsageError(f"Invalid format spec {format_spec!r}: {exc}") from exc

    try:
        console.print(text)
    except OSError as exc:
        raise PrintableIOError(f"Cannot write output: {exc}") from exc
