"""Style discovery over a styles directory."""

from __future__ import annotations

from pathlib import Path

from stylecraft.errors import StyleLoadError
from stylecraft.styles import loader
from stylecraft.styles.constants import StyleLocation
from stylecraft.styles.models import Style, Theme

_MAX_STYLE_DIR_CANDIDATES = 512


class StyleCatalog:
    """Lists the styles below a root directory and loads them on request.

    A style is a sub-directory that contains ``<name>.json``.
    """

    def __init__(self, root: Path | None = None) -> None:
        self._root = root
        self._style_dirs: dict[str, Path] = {}
        self._scan_errors: list[str] = []

    @property
    def root(self) -> Path | None:
        return self._root

    def set_root(self, path: Path | None) -> None:
        self._root = path

    def reload(self) -> None:
        self._style_dirs = {}
        self._scan_errors = []
        if self._root is None or not self._root.exists():
            return
        try:
            all_dirs = sorted(path for path in self._root.iterdir() if path.is_dir())
        except OSError as exc:
            self._scan_errors.append(f"Failed to list styles in {self._root}: {exc}")
            return

        candidates: list[Path] = []
        for path in all_dirs:
            if path.is_symlink():
                self._scan_errors.append(f"Skipping symlink style directory: {path}")
                continue
            if not loader.descriptor_path(path).is_file():
                continue
            candidates.append(path)
        if len(candidates) > _MAX_STYLE_DIR_CANDIDATES:
            self._scan_errors.append(
                f"Style directory limit exceeded in {self._root}; "
                f"only first {_MAX_STYLE_DIR_CANDIDATES} folders were scanned."
            )
            candidates = candidates[:_MAX_STYLE_DIR_CANDIDATES]
        self._style_dirs = {path.name: path for path in candidates}

    def style_ids(self) -> list[str]:
        return list(self._style_dirs)

    def has_style(self, style_id: str) -> bool:
        return style_id in self._style_dirs

    def style_path(self, style_id: str) -> Path | None:
        return self._style_dirs.get(style_id)

    def location_path(self, style_id: str, location: StyleLocation) -> Path | None:
        style_dir = self.style_path(style_id)
        if style_dir is None:
            return None
        return style_dir / location.value

    def scan_errors(self) -> list[str]:
        return list(self._scan_errors)

    def load_style(self, style_id: str) -> Style:
        style_dir = self._style_dirs.get(style_id)
        if style_dir is None:
            raise StyleLoadError(f"Style not found: {style_id}")
        return loader.load_style(style_dir)

    def load_theme(self, style: Style, theme_id: str) -> Theme:
        return loader.load_theme(style, theme_id)
