# topmark:header:start
#
#   project      : Printable
#   file         : test_sink_errors.py
#   file_relpath : tests/view/test_sink_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Failure propagation from sinks during `PrintableView.render`."""

from __future__ import annotations

import pytest

from printable import wrap
from tests.conftest import parametrize


class SinkFull(OSError):
    """Sink-specific failure used to check errors are not translated."""


class FailingSink:
    """Sink that fails on the n-th write (1-based) and records earlier fragments."""

    def __init__(self, fail_at: int) -> None:
        self.fail_at = fail_at
        self.fragments: list[str] = []
        self.error = SinkFull(f"write #{fail_at} refused")

    def write(self, s: str) -> int:
        if len(self.fragments) + 1 == self.fail_at:
            raise self.error
        self.fragments.append(s)
        return len(s)


@parametrize("fail_at", [1, 2, 3, 4, 5])
def test_sink_error_propagates_unchanged_and_stops_rendering(fail_at: int) -> None:
    """The exact sink exception escapes; only earlier fragments were written."""
    expected = ["[", "1", ", ", "2", "]"]
    sink = FailingSink(fail_at)

    with pytest.raises(SinkFull) as excinfo:
        wrap([1, 2]).render(sink)

    assert excinfo.value is sink.error
    assert sink.fragments == expected[: fail_at - 1]


def test_failure_does_not_affect_later_renders() -> None:
    """A failed render leaves the view usable."""
    view = wrap([1, 2])
    with pytest.raises(SinkFull):
        view.render(FailingSink(2))
    assert str(view) == "[1, 2]"


def test_element_error_propagates_after_partial_output() -> None:
    """An element failing to format aborts rendering with its own exception."""

    class Broken:
        def __format__(self, spec: str) -> str:
            raise RuntimeError("cannot display")

    sink = FailingSink(fail_at=100)
    with pytest.raises(RuntimeError, match="cannot display"):
        wrap([1, Broken(), 3]).render(sink)
    assert sink.fragments == ["[", "1", ", "]
