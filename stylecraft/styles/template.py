"""Template placeholder substitution."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Protocol, Union

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([^{}\s]+)\s*\}\}")


class VariableLookup(Protocol):
    def value(self, variable_id: str) -> str | None: ...


Variables = Union[VariableLookup, Mapping[str, str]]


@dataclass(frozen=True, slots=True)
class SubstitutionResult:
    """Output of a substitution run.

    ``text`` is empty whenever ``unresolved`` is not.
    """

    text: str
    unresolved: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.unresolved

    def error_message(self) -> str:
        if self.ok:
            return ""
        joined = ", ".join(self.unresolved)
        return f"Unresolved template variables: {joined}"


class TemplateProcessor:
    """Replaces ``{{variable}}`` placeholders with variable values."""

    def placeholders(self, text: str) -> list[str]:
        seen: dict[str, None] = {}
        for match in _PLACEHOLDER_RE.finditer(text):
            seen.setdefault(match.group(1), None)
        return list(seen)

    def substitute(self, text: str, variables: Variables) -> SubstitutionResult:
        lookup = _lookup_for(variables)
        values: dict[str, str] = {}
        unresolved: list[str] = []
        for variable_id in self.placeholders(text):
            value = lookup(variable_id)
            if value is None:
                unresolved.append(variable_id)
            else:
                values[variable_id] = value
        if unresolved:
            return SubstitutionResult(text="", unresolved=tuple(unresolved))
        output = _PLACEHOLDER_RE.sub(lambda match: values[match.group(1)], text)
        return SubstitutionResult(text=output)


def _lookup_for(variables: Variables) -> Callable[[str], str | None]:
    if isinstance(variables, Mapping):
        return variables.get
    return variables.value
