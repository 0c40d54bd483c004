# topmark:header:start
#
#   project      : Printable
#   file         : style.py
#   file_relpath : src/printable/style.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable separator/bound presets for printable views.

A [`RenderStyle`][printable.style.RenderStyle] bundles the three view settings
so they can be loaded from configuration once and applied to many views.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from printable.config.keys import Toml
from printable.config.logging import get_logger
from printable.constants import DEFAULT_LEFT_BOUND, DEFAULT_RIGHT_BOUND, DEFAULT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Mapping

    from printable.config.logging import PrintableLogger
    from printable.view import PrintableView, T

logger: PrintableLogger = get_logger(__name__)


class StyleValueError(TypeError):
    """Raised when a style setting is not a string."""


@dataclass(frozen=True)
class RenderStyle:
    """Separator and bounds to apply to a [`PrintableView`][printable.view.PrintableView]."""

    separator: str = DEFAULT_SEPARATOR
    left_bound: str = DEFAULT_LEFT_BOUND
    right_bound: str = DEFAULT_RIGHT_BOUND

    def apply(self, view: PrintableView[T]) -> PrintableView[T]:
        """Return ``view`` reconfigured with this style's separator and bounds."""
        return (
            view.with_separator(self.separator)
            .with_left_bound(self.left_bound)
            .with_right_bound(self.right_bound)
        )

    def merged(self, table: Mapping[str, Any]) -> RenderStyle:
        """Return a copy with the settings present in ``table`` replaced.

        Keys not naming a style setting are logged and ignored.

        Args:
            table (Mapping[str, Any]): A flat TOML-like table, e.g. ``{"separator": "."}``.

        Returns:
            RenderStyle: The merged style.

        Raises:
            StyleValueError: If a known setting has a non-string value.
        """
        known: set[str] = {f.name for f in fields(self)}
        values: dict[str, str] = {f.name: getattr(self, f.name) for f in fields(self)}
        for key, value in table.items():
            if key not in known:
                logger.warning("Ignoring unknown style setting %r", key)
                continue
            if not isinstance(value, str):
                raise StyleValueError(
                    f"Style setting '{key}' must be a string, got {type(value).__name__}"
                )
            values[key] = value
        return RenderStyle(**values)

    @classmethod
    def from_mapping(cls, table: Mapping[str, Any]) -> RenderStyle:
        """Build a style from a TOML-like table, using defaults for missing keys."""
        return cls().merged(table)

    def to_dict(self) -> dict[str, str]:
        """Return the style as a TOML-compatible table."""
        return {
            Toml.KEY_SEPARATOR: self.separator,
            Toml.KEY_LEFT_BOUND: self.left_bound,
            Toml.KEY_RIGHT_BOUND: self.right_bound,
        }
