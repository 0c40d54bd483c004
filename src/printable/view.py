# topmark:header:start
#
#   project      : Printable
#   file         : view.py
#   file_relpath : src/printable/view.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable views over repeatable iterables.

A [`PrintableView`][printable.view.PrintableView] holds an iterable together
with a separator and a left/right bound, and renders as
``left_bound item sep item ... right_bound``. Views are immutable: each
``with_*`` call returns a new view with one field replaced.

Warning:
    The wrapped iterable must be *repeatable*: every ``iter()`` call has to
    return a fresh iterator over the same elements. Every render starts a new
    traversal, so an iterable whose ``__iter__`` copies its data pays that cost
    on each render, and a one-shot iterator (e.g. a generator) renders its
    elements once and an empty body afterwards. Use
    [`PrintableView.from_iterable`][printable.view.PrintableView.from_iterable]
    to snapshot one-shot iterables.

Examples:
    ```python
    v = [1, 2, 3]
    str(wrap(v))                           # "[1, 2, 3]"
    str(wrap(v).with_separator("."))       # "[1.2.3]"
    str(wrap(v).with_left_bound("{"))      # "{1, 2, 3]"
    str(wrap(v).with_right_bound("}"))     # "[1, 2, 3}"
    str(wrap([]))                          # "[]"
    ```
"""

from __future__ import annotations

import io
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from printable.config.logging import get_logger
from printable.constants import DEFAULT_LEFT_BOUND, DEFAULT_RIGHT_BOUND, DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from printable.config.logging import PrintableLogger

logger: PrintableLogger = get_logger(__name__)

T = TypeVar("T")


class TextSink(Protocol):
    """Destination for rendered text fragments.

    Any object with a ``write(str)`` method qualifies: ``io.StringIO``,
    ``sys.stdout``, an open text file, ...
    """

    def write(self, s: str, /) -> object:
        """Append ``s`` to the sink; may raise on failure."""
        ...


@dataclass(frozen=True)
class PrintableView(Generic[T]):
    """Immutable display wrapper around a repeatable iterable.

    Attributes:
        sequence (Iterable[T]): The wrapped iterable. Kept by reference, never copied.
        separator (str): Text written strictly between consecutive elements.
        left_bound (str): Text written before the elements, even when there are none.
        right_bound (str): Text written after the elements, even when there are none.

    Views compare and hash by value. A view is hashable only when its wrapped
    iterable is: ``hash(wrap((1, 2)))`` works, ``hash(wrap([1, 2]))`` raises
    ``TypeError`` just like hashing the list itself.
    """

    sequence: Iterable[T]
    separator: str = DEFAULT_SEPARATOR
    left_bound: str = DEFAULT_LEFT_BOUND
    right_bound: str = DEFAULT_RIGHT_BOUND

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> PrintableView[T]:
        """Wrap an owned snapshot of ``values`` with the default configuration.

        Unlike [`wrap`][printable.view.wrap], the values are copied into a tuple
        once, so one-shot iterables render consistently and later changes to
        the source collection are not reflected.

        Args:
            values (Iterable[T]): Any iterable, including generators.

        Returns:
            PrintableView[T]: A view owning its own copy of the values.
        """
        return cls(tuple(values))

    def with_separator(self, separator: str) -> PrintableView[T]:
        """Return a copy of this view using ``separator`` between elements.

        Examples:
            ```python
            str(wrap([1, 2, 3]).with_separator("."))  # "[1.2.3]"
            ```
        """
        return replace(self, separator=separator)

    def with_left_bound(self, left_bound: str) -> PrintableView[T]:
        """Return a copy of this view using ``left_bound`` before the elements.

        Examples:
            ```python
            str(wrap([1, 2, 3]).with_left_bound("{"))  # "{1, 2, 3]"
            ```
        """
        return replace(self, left_bound=left_bound)

    def with_right_bound(self, right_bound: str) -> PrintableView[T]:
        """Return a copy of this view using ``right_bound`` after the elements.

        Examples:
            ```python
            str(wrap([1, 2, 3]).with_right_bound("}"))  # "[1, 2, 3}"
            ```
        """
        return replace(self, right_bound=right_bound)

    def render(self, sink: TextSink, format_spec: str = "") -> None:
        """Write the rendered view to ``sink``.

        Elements are written with ``format(element, format_spec)``; the bounds
        and separator are written verbatim. Element text is not escaped.

        Args:
            sink (TextSink): Destination receiving the text fragments in order.
            format_spec (str): Format specification applied to every element.

        Raises:
            Exception: Whatever ``sink.write`` or an element's ``__format__``
                raises, unchanged. Rendering stops at that point and fragments
                written so far stay in the sink.
        """
        logger.trace(
            "Rendering view: sep=%r left=%r right=%r spec=%r",
            self.separator,
            self.left_bound,
            self.right_bound,
            format_spec,
        )
        sink.write(self.left_bound)
        first = True
        for item in self.sequence:
            if not first:
                sink.write(self.separator)
            sink.write(format(item, format_spec))
            first = False
        sink.write(self.right_bound)

    def __str__(self) -> str:
        return format(self, "")

    def __format__(self, format_spec: str) -> str:
        buffer = io.StringIO()
        self.render(buffer, format_spec)
        return buffer.getvalue()


def wrap(sequence: Iterable[T]) -> PrintableView[T]:
    """Wrap a repeatable iterable into a [`PrintableView`][printable.view.PrintableView].

    The view uses separator ``", "`` and bounds ``"["`` / ``"]"``. Nothing is
    validated or traversed here; see the module warning about one-shot iterators.

    Args:
        sequence (Iterable[T]): The iterable to render; kept by reference.

    Returns:
        PrintableView[T]: The view with default configuration.
    """
    return PrintableView(sequence)
