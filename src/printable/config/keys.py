# topmark:header:start
#
#   project      : Printable
#   file         : keys.py
#   file_relpath : src/printable/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Printable configuration.

Keys live at the top level of ``printable.toml`` and under
``[tool.printable]`` in ``pyproject.toml``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Printable configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_PRINTABLE: Final[str] = "printable"

    # Style settings
    KEY_SEPARATOR: Final[str] = "separator"
    KEY_LEFT_BOUND: Final[str] = "left_bound"
    KEY_RIGHT_BOUND: Final[str] = "right_bound"
