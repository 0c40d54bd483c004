# topmark:header:start
#
#   project      : Printable
#   file         : loaders.py
#   file_relpath : src/printable/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and resolve the effective render style.

Sources, lowest precedence first:
- the runtime defaults (defined in code, no I/O),
- ``pyproject.toml`` (``[tool.printable]``) in the working directory,
- ``printable.toml`` in the working directory,
- explicitly requested config files, in the order given,
- per-invocation overrides (e.g. CLI flags).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from printable.config.keys import Toml
from printable.config.logging import get_logger
from printable.constants import PRINTABLE_TOML_NAME, PYPROJECT_TOML_NAME
from printable.style import RenderStyle

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from printable.config.logging import PrintableLogger

TomlTable = dict[str, Any]

logger: PrintableLogger = get_logger(__name__)


class ConfigFileError(Exception):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot load config file {path}: {reason}")
        self.path = path
        self.reason = reason


def load_defaults_dict() -> TomlTable:
    """Return Printable's runtime defaults as a new dict (no I/O)."""
    return RenderStyle().to_dict()


def read_toml_table(path: Path) -> TomlTable:
    """Read the Printable settings table from a TOML file.

    For ``pyproject.toml`` the ``[tool.printable]`` table is returned (empty
    when absent); for any other file the whole document is the table.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed settings table.

    Raises:
        ConfigFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigFileError(path, str(e)) from e
    except TomlkitParseError as e:
        raise ConfigFileError(path, str(e)) from e
    except (TypeError, ValueError) as e:
        # UnicodeDecodeError lands here
        raise ConfigFileError(path, str(e)) from e

    data: Any = doc.unwrap()
    if not isinstance(data, dict):
        return {}
    table = cast("TomlTable", data)
    if path.name == PYPROJECT_TOML_NAME:
        return extract_pyproject_table(table)
    return table


def extract_pyproject_table(data: Mapping[str, Any]) -> TomlTable:
    """Return the ``[tool.printable]`` table from parsed pyproject data."""
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return {}
    section: Any = cast("TomlTable", tool).get(Toml.SECTION_PRINTABLE, {})
    return cast("TomlTable", section) if isinstance(section, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load a discovered TOML file, ignoring it when it cannot be loaded.

    Notes:
        Errors are logged and an empty dict is returned on failure.
    """
    try:
        return read_toml_table(path)
    except ConfigFileError as e:
        logger.error("%s", e)
        return {}


def discover_config_files(cwd: Path) -> list[Path]:
    """Return the config files present in ``cwd``, lowest precedence first."""
    candidates: list[Path] = [cwd / PYPROJECT_TOML_NAME, cwd / PRINTABLE_TOML_NAME]
    found: list[Path] = [p for p in candidates if p.is_file()]
    logger.debug("Discovered config files in %s: %s", cwd, [str(p) for p in found])
    return found


def resolve_style(
    *,
    cwd: Path | None = None,
    config_files: Iterable[Path] = (),
    overrides: Mapping[str, str | None] | None = None,
) -> RenderStyle:
    """Resolve the effective render style from all configuration layers.

    Args:
        cwd: Directory searched for ``pyproject.toml`` / ``printable.toml``;
            discovery is skipped when None.
        config_files: Explicit config files, each layered over the previous.
            Unlike discovered files, these must load successfully.
        overrides: Final per-invocation values; ``None`` values are ignored.

    Returns:
        The merged style.

    Raises:
        ConfigFileError: If an explicit config file cannot be loaded.
        StyleValueError: If a setting has a non-string value.
    """
    style = RenderStyle.from_mapping(load_defaults_dict())
    if cwd is not None:
        for path in discover_config_files(cwd):
            style = style.merged(load_toml_dict(path))
    for path in config_files:
        logger.debug("Loading explicit config file %s", path)
        style = style.merged(read_toml_table(path))
    if overrides:
        style = style.merged({k: v for k, v in overrides.items() if v is not None})
    logger.trace("Resolved style: %r", style)
    return style
