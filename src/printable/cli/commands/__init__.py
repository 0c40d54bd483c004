# topmark:header:start
#
#   project      : Printable
#   file         : __init__.py
#   file_relpath : src/printable/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable CLI subcommands."""

from __future__ import annotations
