"""Tests for persisted style settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from stylecraft.config.settings import AppSettings


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AppSettings:
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    return AppSettings(tmp_path / "settings.ini")


def test_defaults(settings: AppSettings, tmp_path: Path) -> None:
    assert settings.styles_dir == ""
    assert settings.style == ""
    assert settings.theme == ""
    assert settings.variable_overrides == {}
    assert settings.output_dir == str(tmp_path / "appdata" / "stylecraft" / "output")


def test_selection_round_trip(settings: AppSettings, tmp_path: Path) -> None:
    settings.styles_dir = str(tmp_path / "styles")
    settings.style = "  alpha "
    settings.theme = "dark"
    settings.output_dir = str(tmp_path / "out")
    settings.sync()

    reopened = AppSettings(tmp_path / "settings.ini")
    assert reopened.styles_dir == str(tmp_path / "styles")
    assert reopened.style == "alpha"
    assert reopened.theme == "dark"
    assert reopened.output_dir == str(tmp_path / "out")


def test_variable_overrides_are_cleaned(settings: AppSettings) -> None:
    settings.variable_overrides = {"primary": "#ffffff", "bad": 3}  # type: ignore[dict-item]
    assert settings.variable_overrides == {"primary": "#ffffff"}
