"""Style framework constants."""

from __future__ import annotations

from enum import Enum

THEMES_DIR_NAME = "themes"
RESOURCES_DIR_NAME = "resources"
FONTS_DIR_NAME = "fonts"

THEME_FILE_SUFFIX = ".xml"
DESCRIPTOR_SUFFIX = ".json"
STYLESHEET_OUTPUT_SUFFIX = ".css"
RESOURCE_TEMPLATE_GLOB = "*.svg"

COLOR_TAG = "color"


class StyleLocation(Enum):
    """Named sub-locations of a style directory."""

    THEMES = THEMES_DIR_NAME
    RESOURCE_TEMPLATES = RESOURCES_DIR_NAME
    FONTS = FONTS_DIR_NAME


# QPalette.ColorRole name -> canonical theme variable id.
PALETTE_ROLE_VARIABLES: dict[str, str] = {
    "Window": "backgroundColor",
    "WindowText": "textColor",
    "Base": "backgroundColor",
    "AlternateBase": "backgroundLightColor",
    "Text": "textColor",
    "Button": "backgroundLightColor",
    "ButtonText": "textColor",
    "Highlight": "primaryColor",
    "HighlightedText": "primaryTextColor",
    "Link": "primaryColor",
    "PlaceholderText": "textDisabledColor",
    "ToolTipBase": "backgroundLightColor",
    "ToolTipText": "textColor",
}
