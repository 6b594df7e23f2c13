"""Headless stylesheet regeneration bootstrap."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from stylecraft.config.settings import AppSettings
from stylecraft.styles.catalog import StyleCatalog
from stylecraft.styles.manager import StyleManager


def _configure_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("stylecraft")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "stylecraft.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def create_style_manager(settings: AppSettings) -> StyleManager:
    """Build a StyleManager and restore the persisted selection onto it.

    A persisted style or theme that no longer loads is left unselected; the
    reason is available from ``error_string()``.
    """
    manager = StyleManager(StyleCatalog(), output_dir=Path(settings.output_dir))
    if settings.styles_dir:
        manager.set_styles_dir_path(Path(settings.styles_dir))
    if not settings.style or not manager.set_current_style(settings.style):
        return manager
    if settings.theme and settings.theme != manager.current_theme():
        if not manager.set_current_theme(settings.theme):
            return manager
    for variable_id, value in settings.variable_overrides.items():
        manager.set_theme_variable_value(variable_id, value)
    return manager


def run_app(settings: AppSettings | None = None) -> int:
    """Regenerate the persisted style's resources and stylesheet."""
    settings = settings or AppSettings()
    logger = _configure_logger(settings)
    logger.info("styles_dir=%s output_dir=%s", settings.styles_dir or "-", settings.output_dir)

    manager = create_style_manager(settings)
    if manager.error_state().is_error:
        logger.error("could not restore style selection: %s", manager.error_string())
        return 1
    if not manager.current_style():
        logger.error("no style configured")
        return 1

    if not manager.update_stylesheet():
        logger.error("stylesheet update failed (%s): %s", manager.error().name, manager.error_string())
        return 1
    logger.info(
        "generated %s/%s into %s",
        manager.current_style(),
        manager.current_theme() or "-",
        manager.current_style_output_path(),
    )
    return 0
