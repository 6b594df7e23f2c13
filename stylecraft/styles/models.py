"""Style framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from stylecraft.styles.constants import STYLESHEET_OUTPUT_SUFFIX


@dataclass(frozen=True, slots=True)
class Theme:
    """A named set of variable values belonging to a style."""

    theme_id: str
    variables: Mapping[str, str]
    color_ids: frozenset[str] = frozenset()
    source_path: Path | None = None

    def color_variables(self) -> dict[str, str]:
        return {key: value for key, value in self.variables.items() if key in self.color_ids}


@dataclass(frozen=True, slots=True)
class ResourceTemplate:
    """A resource template and the file name its output is written to."""

    name: str
    text: str


@dataclass(frozen=True, slots=True)
class Style:
    """A fully loaded style."""

    style_id: str
    source_dir: Path
    descriptor: Mapping[str, object]
    theme_ids: tuple[str, ...]
    default_theme: str | None
    stylesheet_template: str | None = None
    resource_templates: tuple[ResourceTemplate, ...] = ()
    icon_path: Path | None = None
    palette_roles: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "descriptor", MappingProxyType(dict(self.descriptor)))
        object.__setattr__(self, "palette_roles", MappingProxyType(dict(self.palette_roles)))

    @property
    def stylesheet_file_name(self) -> str:
        return f"{self.style_id}{STYLESHEET_OUTPUT_SUFFIX}"

    def has_theme(self, theme_id: str) -> bool:
        return theme_id in self.theme_ids
