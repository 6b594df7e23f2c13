"""Application settings via QSettings."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

from PySide6.QtCore import QSettings


class AppSettings:
    """Wraps QSettings for persistent style configuration.

    Pass ``path`` to keep the settings in an INI file instead of the
    platform's native store.
    """

    def __init__(self, path: Path | None = None) -> None:
        if path is None:
            self._qs = QSettings("Stylecraft", "Stylecraft")
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    def sync(self) -> None:
        self._qs.sync()

    # -- directories --

    @property
    def styles_dir(self) -> str:
        return self._qs.value("dirs/styles", "", type=str)

    @styles_dir.setter
    def styles_dir(self, value: str) -> None:
        self._qs.setValue("dirs/styles", value)

    @property
    def output_dir(self) -> str:
        raw = self._qs.value("dirs/output", "", type=str)
        value = (raw or "").strip()
        return value or str(self.app_data_dir / "output")

    @output_dir.setter
    def output_dir(self, value: str) -> None:
        self._qs.setValue("dirs/output", (value or "").strip())

    # -- selection --

    @property
    def style(self) -> str:
        raw = self._qs.value("style/current", "", type=str)
        return (raw or "").strip()

    @style.setter
    def style(self, value: str) -> None:
        self._qs.setValue("style/current", (value or "").strip())

    @property
    def theme(self) -> str:
        raw = self._qs.value("style/theme", "", type=str)
        return (raw or "").strip()

    @theme.setter
    def theme(self, value: str) -> None:
        self._qs.setValue("style/theme", (value or "").strip())

    # -- variable overrides --

    @property
    def variable_overrides(self) -> dict[str, str]:
        raw = self._qs.value("style/variable_overrides", {})
        if not isinstance(raw, Mapping):
            return {}
        cleaned: dict[str, str] = {}
        for key, value in raw.items():
            if isinstance(key, str) and isinstance(value, str):
                cleaned[key] = value
        return cleaned

    @variable_overrides.setter
    def variable_overrides(self, value: Mapping[str, str]) -> None:
        cleaned: dict[str, str] = {}
        for key, item in value.items():
            if isinstance(key, str) and isinstance(item, str):
                cleaned[key] = item
        self._qs.setValue("style/variable_overrides", cleaned)

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        import os
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "stylecraft"
