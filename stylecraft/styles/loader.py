"""Style descriptor and theme file parsing."""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Mapping

from stylecraft.errors import StyleErrorKind, StyleLoadError
from stylecraft.styles.constants import (
    COLOR_TAG,
    DESCRIPTOR_SUFFIX,
    PALETTE_ROLE_VARIABLES,
    RESOURCE_TEMPLATE_GLOB,
    RESOURCES_DIR_NAME,
    THEME_FILE_SUFFIX,
    THEMES_DIR_NAME,
)
from stylecraft.styles.models import ResourceTemplate, Style, Theme

_VARIABLE_ID_RE = re.compile(r"[^{}\s]+")

_MAX_DESCRIPTOR_BYTES = 64 * 1024
_MAX_THEME_BYTES = 256 * 1024
_MAX_TEMPLATE_BYTES = 2 * 1024 * 1024
_MAX_RESOURCE_BYTES = 512 * 1024
_MAX_VALUE_LEN = 256

_DESCRIPTOR_KEYS = {
    "name",
    "description",
    "author",
    "version",
    "stylesheet",
    "default_theme",
    "icon",
    "resources",
    "palette",
}


def descriptor_path(style_dir: Path) -> Path:
    return style_dir / f"{style_dir.name}{DESCRIPTOR_SUFFIX}"


def list_theme_ids(style_dir: Path) -> tuple[str, ...]:
    themes_dir = style_dir / THEMES_DIR_NAME
    if not themes_dir.is_dir():
        return ()
    try:
        paths = sorted(themes_dir.glob(f"*{THEME_FILE_SUFFIX}"))
    except OSError as exc:
        raise StyleLoadError(f"Unable to list themes in {themes_dir}: {exc}") from exc
    return tuple(path.stem for path in paths if path.is_file())


def load_style(style_dir: Path) -> Style:
    """Load and validate a single style directory."""
    if not style_dir.is_dir():
        raise StyleLoadError(f"Style path is not a directory: {style_dir}")
    style_id = style_dir.name
    descriptor = _load_descriptor(style_dir)

    theme_ids = list_theme_ids(style_dir)
    default_theme = _optional_str(descriptor, "default_theme", style_dir)
    if default_theme is not None and default_theme not in theme_ids:
        raise StyleLoadError(f"{style_dir}: default_theme {default_theme!r} has no theme file")
    if default_theme is None and theme_ids:
        default_theme = theme_ids[0]

    stylesheet_template = None
    stylesheet_name = _optional_str(descriptor, "stylesheet", style_dir)
    if stylesheet_name is not None:
        stylesheet_template = _read_style_file(
            _child_path(style_dir, stylesheet_name, style_dir),
            max_bytes=_MAX_TEMPLATE_BYTES,
        )

    icon_path = None
    icon_name = _optional_str(descriptor, "icon", style_dir)
    if icon_name is not None:
        icon_path = _child_path(style_dir, icon_name, style_dir)
        if not icon_path.is_file():
            raise StyleLoadError(f"{style_dir}: icon file not found: {icon_name}")

    return Style(
        style_id=style_id,
        source_dir=style_dir,
        descriptor=descriptor,
        theme_ids=theme_ids,
        default_theme=default_theme,
        stylesheet_template=stylesheet_template,
        resource_templates=_load_resource_templates(style_dir, descriptor.get("resources")),
        icon_path=icon_path,
        palette_roles=_parse_palette(descriptor.get("palette"), style_dir),
    )


def load_theme(style: Style, theme_id: str) -> Theme:
    """Parse the theme file ``<style>/themes/<theme_id>.xml``."""
    if not style.has_theme(theme_id):
        raise StyleLoadError(
            f"Style {style.style_id!r} has no theme {theme_id!r}",
            StyleErrorKind.THEME_LOAD_ERROR,
        )
    path = style.source_dir / THEMES_DIR_NAME / f"{theme_id}{THEME_FILE_SUFFIX}"
    content = _read_style_file(path, max_bytes=_MAX_THEME_BYTES, kind=StyleErrorKind.THEME_LOAD_ERROR)
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise StyleLoadError(f"Invalid XML in {path}: {exc}", StyleErrorKind.THEME_LOAD_ERROR) from exc

    variables: dict[str, str] = {}
    color_ids: set[str] = set()
    for element in root:
        variable_id = (element.get("name") or "").strip()
        if not _VARIABLE_ID_RE.fullmatch(variable_id):
            raise StyleLoadError(
                f"{path}: <{element.tag}> needs a name without braces or whitespace",
                StyleErrorKind.THEME_LOAD_ERROR,
            )
        if variable_id in variables:
            raise StyleLoadError(
                f"{path}: duplicate variable {variable_id!r}",
                StyleErrorKind.THEME_LOAD_ERROR,
            )
        value = (element.text or "").strip()
        if len(value) > _MAX_VALUE_LEN:
            raise StyleLoadError(
                f"{path}: value of {variable_id!r} is too long",
                StyleErrorKind.THEME_LOAD_ERROR,
            )
        variables[variable_id] = value
        if element.tag == COLOR_TAG:
            color_ids.add(variable_id)
    return Theme(theme_id=theme_id, variables=variables, color_ids=frozenset(color_ids), source_path=path)


def _load_resource_templates(style_dir: Path, declared: object) -> tuple[ResourceTemplate, ...]:
    resources_dir = style_dir / RESOURCES_DIR_NAME
    if declared is None:
        if not resources_dir.is_dir():
            return ()
        names = [path.name for path in sorted(resources_dir.glob(RESOURCE_TEMPLATE_GLOB)) if path.is_file()]
    elif isinstance(declared, list) and all(isinstance(item, str) and item for item in declared):
        names = list(declared)
        if len(set(names)) != len(names):
            raise StyleLoadError(f"{style_dir}: resources list contains duplicates")
    else:
        raise StyleLoadError(f"{style_dir}: field 'resources' must be a list of file names")

    return tuple(
        ResourceTemplate(
            name=name,
            text=_read_style_file(_child_path(resources_dir, name, style_dir), max_bytes=_MAX_RESOURCE_BYTES),
        )
        for name in names
    )


def _parse_palette(data: object, style_dir: Path) -> dict[str, str]:
    if data is None:
        return dict(PALETTE_ROLE_VARIABLES)
    if not isinstance(data, dict):
        raise StyleLoadError(f"{style_dir}: field 'palette' must be an object")
    roles: dict[str, str] = {}
    for role, variable_id in data.items():
        if not isinstance(variable_id, str) or not _VARIABLE_ID_RE.fullmatch(variable_id):
            raise StyleLoadError(f"{style_dir}: palette role {role!r} must name a variable")
        roles[role] = variable_id
    return roles


def _child_path(parent: Path, name: str, style_dir: Path) -> Path:
    if Path(name).name != name or name in {".", ".."}:
        raise StyleLoadError(f"{style_dir}: {name!r} must be a plain file name")
    return parent / name


def _optional_str(data: Mapping[str, object], key: str, style_dir: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise StyleLoadError(f"{style_dir}: field {key!r} must be a non-empty string")
    return value.strip()


def _load_descriptor(style_dir: Path) -> dict[str, object]:
    """Parse ``<style>/<style>.json``; only the documented keys are allowed."""
    path = descriptor_path(style_dir)
    try:
        data = json.loads(_read_style_file(path, max_bytes=_MAX_DESCRIPTOR_BYTES))
    except json.JSONDecodeError as exc:
        raise StyleLoadError(f"Style descriptor {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise StyleLoadError(f"Style descriptor {path} must contain a JSON object")
    unknown = sorted(set(data) - _DESCRIPTOR_KEYS)
    if unknown:
        raise StyleLoadError(f"Style descriptor {path} has unsupported keys: {', '.join(unknown)}")
    return data


def _read_style_file(
    path: Path,
    *,
    max_bytes: int,
    kind: StyleErrorKind = StyleErrorKind.STYLE_DESCRIPTOR_ERROR,
) -> str:
    """Read a UTF-8 style file, failing with ``kind`` when it is missing or too large."""
    try:
        if path.stat().st_size > max_bytes:
            raise StyleLoadError(f"{path} is larger than {max_bytes} bytes", kind)
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StyleLoadError(f"Unable to read {path}: {exc}", kind) from exc
