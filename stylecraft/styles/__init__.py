"""Style, theme and template processing exports."""

from stylecraft.styles.catalog import StyleCatalog
from stylecraft.styles.constants import StyleLocation
from stylecraft.styles.manager import StyleManager
from stylecraft.styles.models import ResourceTemplate, Style, Theme
from stylecraft.styles.resources import GenerationResult, ResourceGenerator
from stylecraft.styles.template import SubstitutionResult, TemplateProcessor
from stylecraft.styles.variables import VariableStore

__all__ = [
    "GenerationResult",
    "ResourceGenerator",
    "ResourceTemplate",
    "Style",
    "StyleCatalog",
    "StyleLocation",
    "StyleManager",
    "SubstitutionResult",
    "TemplateProcessor",
    "Theme",
    "VariableStore",
]
