# topmark:header:start
#
#   project      : Printable
#   file         : __init__.py
#   file_relpath : src/printable/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable package.

Printable wraps repeatable iterables into views that render as
``[item, item, ...]``, with a customizable separator and bounds, and plugs
into ``str()``, ``format()`` and f-strings like any other displayable value.

Examples:
    ```python
    from printable import wrap

    str(wrap([1, 2, 3]))                        # "[1, 2, 3]"
    str(wrap([1, 2, 3]).with_separator("."))    # "[1.2.3]"
    f"{wrap([1.5, 2]):.2f}"                     # "[1.50, 2.00]"
    ```
"""

from __future__ import annotations

from printable.style import RenderStyle, StyleValueError
from printable.view import PrintableView, TextSink, wrap

__all__ = [
    "PrintableView",
    "RenderStyle",
    "StyleValueError",
    "TextSink",
    "wrap",
]
