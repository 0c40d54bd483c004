# topmark:header:start
#
#   project      : Printable
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for Printable.

Minimal coverage that the CLI entry point is callable and that `--help`,
the bare group, and `version` succeed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from printable.constants import PRINTABLE_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_cli_entry() -> None:
    """`--help` shows usage information."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    assert "Usage" in result.output


@mark_cli
def test_bare_group_prints_hint_and_help() -> None:
    """Invoking the group without a subcommand prints a hint and the help text."""
    result: Result = run_cli([])

    assert_SUCCESS(result)
    assert "printable render" in result.output
    assert "Usage" in result.output


@mark_cli
def test_version_plain() -> None:
    """`version` prints exactly the installed version."""
    result: Result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == PRINTABLE_VERSION


@mark_cli
def test_version_verbose_has_heading() -> None:
    """`-v version` adds a heading above the version."""
    result: Result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert "Printable version" in result.output
    assert PRINTABLE_VERSION in result.output


@mark_cli
def test_version_json() -> None:
    """`version --format json` emits a parseable object."""
    result: Result = run_cli(["version", "--format", "JSON"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": PRINTABLE_VERSION}


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """-v and -q together are a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)


@mark_cli
def test_help_describes_quiet_flag() -> None:
    """`--help` documents -q as lowering verbosity and conflicting with -v."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)
    text: str = " ".join(result.output.split())
    assert "Lower program-output verbosity" in text
    assert "mutually exclusive with -v" in text
