# topmark:header:start
#
#   project      : Printable
#   file         : __init__.py
#   file_relpath : src/printable/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for Printable."""

from __future__ import annotations
