"""Style selection, stylesheet regeneration and change notification."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from PySide6.QtGui import QColor, QIcon

from stylecraft.errors import NO_ERROR, ErrorState, StyleErrorKind, StyleLoadError
from stylecraft.styles.catalog import StyleCatalog
from stylecraft.styles.constants import RESOURCES_DIR_NAME, StyleLocation
from stylecraft.styles.events import EventChannel
from stylecraft.styles.models import Style, Theme
from stylecraft.styles.palette import ApplicationPaletteSink, PaletteSink, ThemePalette, derive_palette
from stylecraft.styles.resources import ResourceGenerator, ResourceMaterializer
from stylecraft.styles.template import TemplateProcessor
from stylecraft.styles.variables import VariableStore
from stylecraft.styles.writers import FileResourceWriter, FileStylesheetWriter, StylesheetWriter

logger = logging.getLogger(__name__)

_EMPTY_PARAMETERS: Mapping[str, object] = MappingProxyType({})


class StyleManager:
    """Owns the current style and theme and regenerates their output.

    Every fallible public operation returns a success flag and records the
    reason for a failure in ``error()`` / ``error_string()``. Observers
    connected to ``style_changed``, ``theme_changed`` and
    ``stylesheet_changed`` are called synchronously once the corresponding
    state is committed.

    Writers default to files below ``current_style_output_path()``; pass
    explicit collaborators to redirect output.
    """

    def __init__(
        self,
        catalog: StyleCatalog | None = None,
        *,
        output_dir: Path | None = None,
        stylesheet_writer: StylesheetWriter | None = None,
        resource_materializer: ResourceMaterializer | None = None,
        palette_sink: PaletteSink | None = None,
    ) -> None:
        self._catalog = catalog or StyleCatalog()
        self._output_dir = output_dir
        self._stylesheet_writer = stylesheet_writer
        self._resource_materializer = resource_materializer
        self._palette_sink = palette_sink or ApplicationPaletteSink()
        self._processor = TemplateProcessor()
        self._variables = VariableStore()
        self._style: Style | None = None
        self._theme: Theme | None = None
        self._stylesheet = ""
        self._icon: QIcon | None = None
        self._error = NO_ERROR

        self.style_changed: EventChannel[str] = EventChannel()
        self.theme_changed: EventChannel[str] = EventChannel()
        self.stylesheet_changed: EventChannel[None] = EventChannel()

    # -- paths and catalog --

    def set_styles_dir_path(self, path: Path) -> bool:
        """Rescan styles below ``path``.

        A selected style that the new root does not list is deselected and
        ``style_changed`` is emitted with an empty name.
        """
        self._reset_error()
        self._catalog.set_root(Path(path))
        self._catalog.reload()
        if self._style is not None and not self._catalog.has_style(self._style.style_id):
            self._clear_selection()
            self.style_changed.emit("")
        errors = self._catalog.scan_errors()
        if errors:
            logger.warning("style scan warnings: %s", " | ".join(errors[:6]))
        if not Path(path).is_dir():
            return self._fail(StyleErrorKind.STYLE_DESCRIPTOR_ERROR, f"Styles directory not found: {path}")
        return True

    def styles_dir_path(self) -> Path | None:
        return self._catalog.root

    def styles(self) -> list[str]:
        return self._catalog.style_ids()

    def set_output_dir_path(self, path: Path) -> None:
        self._reset_error()
        self._output_dir = Path(path)

    def output_dir_path(self) -> Path | None:
        return self._output_dir

    def current_style_output_path(self) -> Path | None:
        if self._output_dir is None or self._style is None:
            return None
        return self._output_dir / self._style.style_id

    def current_style(self) -> str:
        return self._style.style_id if self._style else ""

    def current_style_path(self) -> Path | None:
        return self._style.source_dir if self._style else None

    def path(self, location: StyleLocation) -> Path | None:
        if self._style is None:
            return None
        return self._style.source_dir / location.value

    def themes(self) -> list[str]:
        return list(self._style.theme_ids) if self._style else []

    def current_theme(self) -> str:
        return self._theme.theme_id if self._theme else ""

    def style_parameters(self) -> Mapping[str, object]:
        return self._style.descriptor if self._style else _EMPTY_PARAMETERS

    def style_icon_path(self) -> Path | None:
        return self._style.icon_path if self._style else None

    def style_icon(self) -> QIcon:
        if self._icon is None:
            icon_path = self.style_icon_path()
            self._icon = QIcon(str(icon_path)) if icon_path is not None else QIcon()
        return self._icon

    # -- selection --

    def set_current_style(self, style: str) -> bool:
        self._reset_error()
        if not self._catalog.has_style(style):
            return self._fail(StyleErrorKind.STYLE_DESCRIPTOR_ERROR, f"Unknown style: {style}")
        try:
            package = self._catalog.load_style(style)
        except StyleLoadError as exc:
            return self._fail(exc.kind, str(exc))

        theme = None
        if package.default_theme is not None:
            try:
                theme = self._catalog.load_theme(package, package.default_theme)
            except StyleLoadError as exc:
                return self._fail(StyleErrorKind.THEME_LOAD_ERROR, str(exc))

        self._style = package
        self._theme = theme
        self._icon = None
        self._variables.clear_overrides()
        if theme is None:
            self._variables.clear_theme()
        else:
            self._variables.load_theme(theme)
        logger.info("style selected: %s (theme %s)", package.style_id, self.current_theme() or "-")

        self.style_changed.emit(package.style_id)
        if theme is not None:
            self.theme_changed.emit(theme.theme_id)
        return True

    def set_current_theme(self, theme: str) -> bool:
        self._reset_error()
        if self._style is None:
            return self._fail(StyleErrorKind.THEME_LOAD_ERROR, "No style selected")
        if not self._style.has_theme(theme):
            return self._fail(
                StyleErrorKind.THEME_LOAD_ERROR,
                f"Style {self._style.style_id!r} has no theme {theme!r}",
            )
        try:
            loaded = self._catalog.load_theme(self._style, theme)
        except StyleLoadError as exc:
            return self._fail(StyleErrorKind.THEME_LOAD_ERROR, str(exc))

        self._theme = loaded
        self._variables.load_theme(loaded)
        logger.info("theme selected: %s/%s", self._style.style_id, loaded.theme_id)
        self.theme_changed.emit(loaded.theme_id)
        return True

    # -- variables --

    def theme_variable_value(self, variable_id: str) -> str:
        return self._variables.value(variable_id) or ""

    def set_theme_variable_value(self, variable_id: str, value: str) -> None:
        self._reset_error()
        self._variables.set_override(variable_id, value)

    def theme_color(self, variable_id: str) -> QColor:
        return self._variables.color_value(variable_id)

    def theme_color_variables(self) -> dict[str, str]:
        return self._variables.color_variables()

    # -- output --

    def stylesheet(self) -> str:
        return self._stylesheet

    def error(self) -> StyleErrorKind:
        return self._error.kind

    def error_string(self) -> str:
        return self._error.message

    def error_state(self) -> ErrorState:
        return self._error

    def update_stylesheet(self) -> bool:
        """Update the palette, regenerate resources, then the stylesheet.

        Stops at the first failing stage. The stylesheet is only replaced,
        and ``stylesheet_changed`` only emitted, when every stage succeeds.
        """
        self._reset_error()
        if not self._process_style_template():
            return False
        if self._style is None or self._style.stylesheet_template is None:
            return True

        result = self._processor.substitute(self._style.stylesheet_template, self._variables)
        if not result.ok:
            return self._fail(StyleErrorKind.TEMPLATE_ERROR, result.error_message())
        if not self._export(self._style.stylesheet_file_name, result.text):
            return False

        self._stylesheet = result.text
        self.stylesheet_changed.emit(None)
        return True

    def process_style_template(self) -> bool:
        """Update the palette and regenerate resources without a stylesheet."""
        self._reset_error()
        return self._process_style_template()

    def generate_resources(self) -> bool:
        self._reset_error()
        if self._style is None:
            return self._fail(StyleErrorKind.STYLE_DESCRIPTOR_ERROR, "No style selected")
        return self._generate_resources(self._style)

    def process_stylesheet_template(self, template: str, output_file: str | None = None) -> str:
        """Substitute an arbitrary template; optionally write the result.

        Returns an empty string on error.
        """
        self._reset_error()
        result = self._processor.substitute(template, self._variables)
        if not result.ok:
            self._fail(StyleErrorKind.TEMPLATE_ERROR, result.error_message())
            return ""
        if output_file and not self._export(output_file, result.text):
            return ""
        return result.text

    def generate_theme_palette(self) -> ThemePalette:
        roles = self._style.palette_roles if self._style else {}
        return derive_palette(self._variables, roles)

    def update_application_palette_colors(self) -> None:
        self._reset_error()
        self._update_palette()

    # -- internals --

    def _process_style_template(self) -> bool:
        if self._style is None:
            return self._fail(StyleErrorKind.STYLE_DESCRIPTOR_ERROR, "No style selected")
        self._update_palette()
        return self._generate_resources(self._style)

    def _update_palette(self) -> None:
        self._palette_sink.apply_palette(self.generate_theme_palette())

    def _generate_resources(self, style: Style) -> bool:
        if not style.resource_templates:
            return True
        materializer = self._materializer()
        if materializer is None:
            return self._fail(StyleErrorKind.RESOURCE_GENERATION_ERROR, "No output directory set")
        result = ResourceGenerator(materializer, self._processor).generate(
            style.resource_templates,
            self._variables,
        )
        if not result.ok:
            return self._fail(StyleErrorKind.RESOURCE_GENERATION_ERROR, result.error)
        return True

    def _export(self, file_name: str, text: str) -> bool:
        writer = self._writer()
        if writer is None:
            return self._fail(StyleErrorKind.EXPORT_ERROR, "No output directory set")
        if not writer.write(file_name, text):
            return self._fail(StyleErrorKind.EXPORT_ERROR, f"Failed to write stylesheet {file_name}")
        return True

    def _writer(self) -> StylesheetWriter | None:
        if self._stylesheet_writer is not None:
            return self._stylesheet_writer
        output_path = self.current_style_output_path()
        return FileStylesheetWriter(output_path) if output_path is not None else None

    def _materializer(self) -> ResourceMaterializer | None:
        if self._resource_materializer is not None:
            return self._resource_materializer
        output_path = self.current_style_output_path()
        return FileResourceWriter(output_path / RESOURCES_DIR_NAME) if output_path is not None else None

    def _clear_selection(self) -> None:
        self._style = None
        self._theme = None
        self._icon = None
        self._variables.clear_overrides()
        self._variables.clear_theme()

    def _reset_error(self) -> None:
        self._error = NO_ERROR

    def _fail(self, kind: StyleErrorKind, message: str) -> bool:
        if not self._error.is_error:
            self._error = ErrorState.of(kind, message)
            logger.warning("%s: %s", kind.name, message)
        return False
