"""Error kinds and error state for style processing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class StyleErrorKind(Enum):
    """Closed set of failures reported by the style manager."""

    NONE = auto()
    TEMPLATE_ERROR = auto()
    EXPORT_ERROR = auto()
    THEME_LOAD_ERROR = auto()
    STYLE_DESCRIPTOR_ERROR = auto()
    RESOURCE_GENERATION_ERROR = auto()


ERROR_MESSAGES: dict[StyleErrorKind, str] = {
    StyleErrorKind.NONE: "",
    StyleErrorKind.TEMPLATE_ERROR: "The template references variables that are not defined.",
    StyleErrorKind.EXPORT_ERROR: "The generated stylesheet could not be written.",
    StyleErrorKind.THEME_LOAD_ERROR: "The theme is unknown or its theme file is malformed.",
    StyleErrorKind.STYLE_DESCRIPTOR_ERROR: "The style is unknown or its descriptor is malformed.",
    StyleErrorKind.RESOURCE_GENERATION_ERROR: "The style resources could not be generated.",
}


class StyleLoadError(ValueError):
    """Raised by catalog loaders when a style or theme cannot be loaded."""

    def __init__(self, message: str, kind: StyleErrorKind = StyleErrorKind.STYLE_DESCRIPTOR_ERROR) -> None:
        super().__init__(message)
        self.kind = kind


@dataclass(frozen=True, slots=True)
class ErrorState:
    """Error kind and message of the last top-level operation."""

    kind: StyleErrorKind = StyleErrorKind.NONE
    message: str = ""

    @classmethod
    def of(cls, kind: StyleErrorKind, message: str = "") -> "ErrorState":
        return cls(kind=kind, message=message or ERROR_MESSAGES.get(kind, "An unexpected error occurred."))

    @property
    def is_error(self) -> bool:
        return self.kind is not StyleErrorKind.NONE


NO_ERROR = ErrorState()
