"""Layered theme variable lookup."""

from __future__ import annotations

from typing import Mapping

from PySide6.QtGui import QColor

from stylecraft.styles.models import Theme


class VariableStore:
    """Merges the active theme's variables with caller overrides.

    An override shadows the theme value of the same id. Loading a theme
    replaces the theme layer wholesale and leaves the overrides in place.
    """

    def __init__(self, theme: Theme | None = None, overrides: Mapping[str, str] | None = None) -> None:
        self._theme_values: dict[str, str] = {}
        self._color_ids: frozenset[str] = frozenset()
        self._overrides: dict[str, str] = dict(overrides or {})
        if theme is not None:
            self.load_theme(theme)

    def load_theme(self, theme: Theme) -> None:
        self._theme_values = dict(theme.variables)
        self._color_ids = frozenset(theme.color_ids)

    def clear_theme(self) -> None:
        self._theme_values = {}
        self._color_ids = frozenset()

    def set_override(self, variable_id: str, value: str) -> None:
        self._overrides[variable_id] = value

    def clear_overrides(self) -> None:
        self._overrides = {}

    def overrides(self) -> dict[str, str]:
        return dict(self._overrides)

    def value(self, variable_id: str) -> str | None:
        """Return the merged value for ``variable_id`` or None when undefined."""
        if variable_id in self._overrides:
            return self._overrides[variable_id]
        return self._theme_values.get(variable_id)

    def __contains__(self, variable_id: object) -> bool:
        return variable_id in self._overrides or variable_id in self._theme_values

    def variables(self) -> dict[str, str]:
        merged = dict(self._theme_values)
        merged.update(self._overrides)
        return merged

    def color_ids(self) -> frozenset[str]:
        return self._color_ids

    def color_variables(self) -> dict[str, str]:
        """Return the merged values of all variables the theme tags as colors."""
        rows: dict[str, str] = {}
        for variable_id in self._theme_values:
            if variable_id in self._color_ids:
                rows[variable_id] = self.value(variable_id) or ""
        return rows

    def color_value(self, variable_id: str) -> QColor:
        """Parse the merged value as a color; invalid QColor when absent or unparsable."""
        raw = self.value(variable_id)
        if not raw or not QColor.isValidColorName(raw.strip()):
            return QColor()
        return QColor(raw.strip())
