# topmark:header:start
#
#   project      : Printable
#   file         : constants.py
#   file_relpath : src/printable/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Printable Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PRINTABLE_VERSION: str = get_version("printable")

DEFAULT_SEPARATOR: str = ", "
DEFAULT_LEFT_BOUND: str = "["
DEFAULT_RIGHT_BOUND: str = "]"

# Config files discovered in the working directory (in layering order):
PRINTABLE_TOML_NAME: str = "printable.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

LOG_LEVEL_ENV_VAR: str = "PRINTABLE_LOG_LEVEL"

# Argument that selects STDIN as the item source for `printable render`:
STDIN_ITEM_MARKER: str = "-"
