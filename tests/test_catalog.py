"""Tests for style discovery and style/theme file loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from stylecraft.errors import StyleErrorKind, StyleLoadError
from stylecraft.styles.catalog import StyleCatalog
from stylecraft.styles.constants import PALETTE_ROLE_VARIABLES, StyleLocation
from stylecraft.styles.loader import load_style, load_theme


def _write_json(path: Path, data: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _write_theme(style_dir: Path, theme_id: str, body: str) -> None:
    path = style_dir / "themes" / f"{theme_id}.xml"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"<resources>\n{body}\n</resources>\n", encoding="utf-8")


def _write_style(root: Path, style_id: str, descriptor: dict[str, object] | None = None) -> Path:
    style_dir = root / style_id
    _write_json(style_dir / f"{style_id}.json", descriptor or {"stylesheet": "template.css"})
    (style_dir / "template.css").write_text("color: {{primary}};", encoding="utf-8")
    _write_theme(style_dir, "dark", '<color name="primary">#112233</color>\n<variable name="radius">3px</variable>')
    _write_theme(style_dir, "light", '<color name="primary">#eeeeee</color>')
    return style_dir


def test_catalog_lists_only_directories_with_descriptor(tmp_path: Path) -> None:
    _write_style(tmp_path, "beta")
    _write_style(tmp_path, "alpha")
    (tmp_path / "not-a-style").mkdir()

    catalog = StyleCatalog(tmp_path)
    catalog.reload()

    assert catalog.style_ids() == ["alpha", "beta"]
    assert catalog.has_style("alpha")
    assert not catalog.has_style("not-a-style")
    assert catalog.location_path("alpha", StyleLocation.THEMES) == tmp_path / "alpha" / "themes"
    assert catalog.location_path("missing", StyleLocation.FONTS) is None


def test_catalog_missing_root_is_empty(tmp_path: Path) -> None:
    catalog = StyleCatalog(tmp_path / "nope")
    catalog.reload()
    assert catalog.style_ids() == []
    assert catalog.scan_errors() == []


def test_load_style_defaults(tmp_path: Path) -> None:
    style = load_style(_write_style(tmp_path, "alpha"))

    assert style.style_id == "alpha"
    assert style.theme_ids == ("dark", "light")
    assert style.default_theme == "dark"
    assert style.stylesheet_template == "color: {{primary}};"
    assert style.resource_templates == ()
    assert dict(style.palette_roles) == PALETTE_ROLE_VARIABLES
    assert style.stylesheet_file_name == "alpha.css"


def test_load_style_declared_default_theme_and_resources(tmp_path: Path) -> None:
    style_dir = _write_style(
        tmp_path,
        "alpha",
        {
            "stylesheet": "template.css",
            "default_theme": "light",
            "resources": ["zeta.svg", "alpha.svg"],
            "palette": {"Window": "primary"},
        },
    )
    resources = style_dir / "resources"
    resources.mkdir()
    (resources / "alpha.svg").write_text("<svg a='{{primary}}'/>", encoding="utf-8")
    (resources / "zeta.svg").write_text("<svg z='{{primary}}'/>", encoding="utf-8")

    style = load_style(style_dir)

    assert style.default_theme == "light"
    assert [template.name for template in style.resource_templates] == ["zeta.svg", "alpha.svg"]
    assert dict(style.palette_roles) == {"Window": "primary"}


def test_load_style_discovers_svg_resources_sorted(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha")
    resources = style_dir / "resources"
    resources.mkdir()
    (resources / "b.svg").write_text("<svg/>", encoding="utf-8")
    (resources / "a.svg").write_text("<svg/>", encoding="utf-8")
    (resources / "notes.txt").write_text("ignored", encoding="utf-8")

    style = load_style(style_dir)
    assert [template.name for template in style.resource_templates] == ["a.svg", "b.svg"]


def test_load_style_rejects_unknown_descriptor_key(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha", {"stylesheet": "template.css", "script": "rm -rf"})
    with pytest.raises(StyleLoadError) as excinfo:
        load_style(style_dir)
    assert excinfo.value.kind is StyleErrorKind.STYLE_DESCRIPTOR_ERROR


def test_load_style_rejects_invalid_json(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha")
    (style_dir / "alpha.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StyleLoadError):
        load_style(style_dir)


def test_load_style_rejects_unknown_default_theme(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha", {"default_theme": "sepia"})
    with pytest.raises(StyleLoadError):
        load_style(style_dir)


def test_load_style_rejects_path_like_template_name(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha", {"stylesheet": "../outside.css"})
    with pytest.raises(StyleLoadError):
        load_style(style_dir)


def test_load_theme_tags_color_variables(tmp_path: Path) -> None:
    style = load_style(_write_style(tmp_path, "alpha"))
    theme = load_theme(style, "dark")

    assert dict(theme.variables) == {"primary": "#112233", "radius": "3px"}
    assert theme.color_ids == frozenset({"primary"})
    assert theme.color_variables() == {"primary": "#112233"}


def test_load_theme_rejects_malformed_xml(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha")
    (style_dir / "themes" / "dark.xml").write_text("<resources><color name='x'>", encoding="utf-8")
    style = load_style(style_dir)

    with pytest.raises(StyleLoadError) as excinfo:
        load_theme(style, "dark")
    assert excinfo.value.kind is StyleErrorKind.THEME_LOAD_ERROR


def test_load_theme_rejects_duplicate_ids(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha")
    _write_theme(style_dir, "dark", '<color name="primary">#111</color><color name="primary">#222</color>')
    style = load_style(style_dir)

    with pytest.raises(StyleLoadError):
        load_theme(style, "dark")


def test_load_theme_unknown_id(tmp_path: Path) -> None:
    style = load_style(_write_style(tmp_path, "alpha"))
    with pytest.raises(StyleLoadError) as excinfo:
        load_theme(style, "sepia")
    assert excinfo.value.kind is StyleErrorKind.THEME_LOAD_ERROR


def test_load_style_rejects_palette_id_with_trailing_newline(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha", {"palette": {"Window": "primary\n"}})
    with pytest.raises(StyleLoadError):
        load_style(style_dir)


def test_load_theme_reports_oversized_file_as_theme_error(tmp_path: Path) -> None:
    style_dir = _write_style(tmp_path, "alpha")
    _write_theme(style_dir, "dark", "<!--" + "x" * (300 * 1024) + "-->")
    style = load_style(style_dir)

    with pytest.raises(StyleLoadError) as excinfo:
        load_theme(style, "dark")
    assert excinfo.value.kind is StyleErrorKind.THEME_LOAD_ERROR
