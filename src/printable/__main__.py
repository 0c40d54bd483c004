# topmark:header:start
#
#   project      : Printable
#   file         : __main__.py
#   file_relpath : src/printable/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Printable via ``python -m printable``.

Delegates to :func:`printable.cli.main.cli`, the same Click group installed as
the ``printable`` console script.

Examples:
    Render a few items::

        python -m printable render a b c
"""

from __future__ import annotations

from printable.cli.main import cli

if __name__ == "__main__":
    cli()
