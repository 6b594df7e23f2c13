"""Resource (icon) generation from templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from stylecraft.styles.models import ResourceTemplate
from stylecraft.styles.template import TemplateProcessor, Variables

logger = logging.getLogger(__name__)


class ResourceMaterializer(Protocol):
    def materialize(self, name: str, text: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one resource generation run."""

    ok: bool
    written: tuple[str, ...] = ()
    error: str = ""


class ResourceGenerator:
    """Substitutes resource templates in order and materializes each result.

    Stops at the first failing template. Resources written earlier in the same
    run are left in place and listed in ``GenerationResult.written``.
    """

    def __init__(self, materializer: ResourceMaterializer, processor: TemplateProcessor | None = None) -> None:
        self._materializer = materializer
        self._processor = processor or TemplateProcessor()

    def generate(self, templates: Iterable[ResourceTemplate], variables: Variables) -> GenerationResult:
        written: list[str] = []
        for template in templates:
            result = self._processor.substitute(template.text, variables)
            if not result.ok:
                message = f"{template.name}: {result.error_message()}"
                logger.warning("resource generation aborted: %s", message)
                return GenerationResult(ok=False, written=tuple(written), error=message)
            if not self._materializer.materialize(template.name, result.text):
                message = f"{template.name}: failed to materialize resource"
                logger.warning("resource generation aborted: %s", message)
                return GenerationResult(ok=False, written=tuple(written), error=message)
            written.append(template.name)
        return GenerationResult(ok=True, written=tuple(written))
