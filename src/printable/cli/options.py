# topmark:header:start
#
#   project      : Printable
#   file         : options.py
#   file_relpath : src/printable/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Printable CLI.

This module centralizes reusable options (verbosity, color, style overrides)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from printable.cli.errors import PrintableUsageError
from printable.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        PrintableUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PrintableUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Lower program-output verbosity (mutually exclusive with -v).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the ``--no-color`` flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)
    return f


def style_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds separator/bound overrides and config file selection to a command.

    Unset style options are passed as ``None`` so configuration files can
    supply the value.
    """
    f = click.option(
        "--separator",
        "-s",
        "separator",
        type=str,
        default=None,
        help="Text written between consecutive items (default: ', ').",
    )(f)
    f = click.option(
        "--left-bound",
        "left_bound",
        type=str,
        default=None,
        help="Text written before the items (default: '[').",
    )(f)
    f = click.option(
        "--right-bound",
        "right_bound",
        type=str,
        default=None,
        help="Text written after the items (default: ']').",
    )(f)
    f = click.option(
        "--config",
        "-c",
        "config_files",
        type=str,
        multiple=True,
        help="Additional TOML config file(s), layered over discovered ones.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        default=False,
        help="Do not look for pyproject.toml / printable.toml in the working directory.",
    )(f)
    return f
