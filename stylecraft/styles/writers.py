"""File-system writers for generated stylesheets and resources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class StylesheetWriter(Protocol):
    def write(self, file_name: str, text: str) -> bool: ...


def _write_text(path: Path, text: str) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        logger.warning("unable to write %s: %s", path, exc)
        return False
    return True


def _is_plain_file_name(name: str) -> bool:
    return bool(name) and Path(name).name == name and name not in {".", ".."}


class FileStylesheetWriter:
    """Writes generated stylesheets into an output directory."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def write(self, file_name: str, text: str) -> bool:
        if not _is_plain_file_name(file_name):
            logger.warning("rejecting stylesheet output name %r", file_name)
            return False
        return _write_text(self._output_dir / file_name, text)


class FileResourceWriter:
    """Materializes generated resources as files in an output directory."""

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def materialize(self, name: str, text: str) -> bool:
        if not _is_plain_file_name(name):
            logger.warning("rejecting resource output name %r", name)
            return False
        return _write_text(self._output_dir / name, text)
