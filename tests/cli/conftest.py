# topmark:header:start
#
#   project      : Printable
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Printable through Click's `CliRunner`."""

from __future__ import annotations

from typing import IO, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from printable.cli.exit_codes import ExitCode
from printable.cli.main import cli
from printable.config.logging import TRACE_LEVEL, setup_logging


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Combine with the ``isolation`` fixture when config discovery matters.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "a"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input for ``-`` items.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that the command exited with CONFIG_ERROR (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with FILE_NOT_FOUND (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Re-attach test logging after the CLI rebinds it to the runner's streams."""
    yield
    setup_logging(level=TRACE_LEVEL)
