# topmark:header:start
#
#   project      : Printable
#   file         : errors.py
#   file_relpath : src/printable/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Printable CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. They prefer the project console if one is present in the Click
context (see `show()`), and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from printable.cli.exit_codes import ExitCode


class PrintableError(click.ClickException):
    """Base class for all Printable CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class PrintableUsageError(PrintableError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PrintableConfigError(PrintableError):
    """Error for configuration errors (unreadable/malformed/invalid config)."""

    exit_code = ExitCode.CONFIG_ERROR


class PrintableFileNotFoundError(PrintableError):
    """Error when an explicitly requested file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PrintableIOError(PrintableError):
    """Error for failures while writing rendered output."""

    exit_code = ExitCode.IO_ERROR
