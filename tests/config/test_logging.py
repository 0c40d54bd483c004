# topmark:header:start
#
#   project      : Printable
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `printable.config.logging`."""

from __future__ import annotations

import logging

import pytest

from printable.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    PrintableLogger,
    get_logger,
    resolve_env_log_level,
)
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" info ", logging.INFO),
        ("WARN", logging.WARNING),
        ("FATAL", logging.CRITICAL),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """PRINTABLE_LOG_LEVEL accepts level names (any case) and numbers."""
    monkeypatch.setenv("PRINTABLE_LOG_LEVEL", value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable no level is forced."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_printable_logger() -> None:
    """Project loggers expose trace()."""
    logger = get_logger("printable.tests.sample")
    assert isinstance(logger, PrintableLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_is_emitted_below_debug(caplog: pytest.LogCaptureFixture) -> None:
    """trace() records at the TRACE level when enabled."""
    logger = get_logger("printable.tests.trace")
    caplog.set_level(TRACE_LEVEL, logger="printable.tests.trace")
    logger.trace("hello %s", "world")
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(TRACE_LEVEL, "hello world")]


def test_chalk_formatter_keeps_message_text() -> None:
    """Colored output still contains the formatted message."""
    record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom %d", (42,), None)
    text = ChalkFormatter("[%(levelname)s] %(message)s").format(record)
    assert "[ERROR] boom 42" in text
