# topmark:header:start
#
#   project      : Printable
#   file         : __init__.py
#   file_relpath : src/printable/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration helpers for Printable.

Public modules:
    - printable.config.keys
    - printable.config.loaders
    - printable.config.logging
"""

from __future__ import annotations
