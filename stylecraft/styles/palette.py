"""Theme palette derivation and application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Protocol

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from stylecraft.styles.variables import VariableStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ThemePalette:
    """Palette colors keyed by ``QPalette.ColorRole`` name."""

    colors: Mapping[str, QColor]

    def color(self, role: str) -> QColor:
        return QColor(self.colors.get(role, QColor()))

    def invalid_roles(self) -> list[str]:
        return sorted(role for role, color in self.colors.items() if not color.isValid())

    def to_qpalette(self, base: QPalette | None = None) -> QPalette:
        """Build a QPalette; invalid colors keep the base palette's color."""
        palette = QPalette(base) if base is not None else QPalette()
        for role_name, color in self.colors.items():
            role = getattr(QPalette.ColorRole, role_name, None)
            if role is None or not color.isValid():
                continue
            palette.setColor(role, color)
        return palette


class PaletteSink(Protocol):
    def apply_palette(self, palette: ThemePalette) -> None: ...


def derive_palette(variables: VariableStore, roles: Mapping[str, str]) -> ThemePalette:
    """Resolve each role's variable id through the store's color parsing."""
    return ThemePalette(colors={role: variables.color_value(variable_id) for role, variable_id in roles.items()})


class ApplicationPaletteSink:
    """Applies theme palettes to the running QApplication, if any."""

    def apply_palette(self, palette: ThemePalette) -> None:
        app = QApplication.instance()
        if not isinstance(app, QApplication):
            logger.debug("no QApplication instance; palette not applied")
            return
        invalid = palette.invalid_roles()
        if invalid:
            logger.info("palette roles without a valid color: %s", ", ".join(invalid))
        app.setPalette(palette.to_qpalette(app.palette()))
