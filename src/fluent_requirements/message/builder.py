"""Rendering of a single failure into a message.

A message is a sentence, followed by aligned ``name: value`` context lines
and, for equality checks on long values, a character diff:

```text
"name" had an unexpected value.

name    : "Jonathan"
diff    :     ---
expected: "Jon"

Legend
------
...
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Union

from fluent_requirements.failures import FailureKind, ValidationFailure
from fluent_requirements.message.diff import DIFF_LEGEND, diff_sections, unique_label
from fluent_requirements.string_mappers import StringMappers

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator

Section = Union[Dict[str, str], str]


def quote_name(name: str) -> str:
    """Quote a plain name; leave expressions such as ``len(items)`` or ``a.b`` as is."""
    if "." in name or "(" in name:
        return name
    return f'"{name}"'


class MessageBuilder:
    """Builds the failure recorded by a validator.

    Args:
        validator: The validator reporting the failure
        message: The sentence describing the failure, ending with a period
    """

    def __init__(self, validator: ObjectValidator, message: str) -> None:
        self._validator = validator
        self._message = message
        self._failure_context: Dict[str, Any] = {}
        self._diff: List[Section] = []

    def with_context(self, value: Any, name: str) -> MessageBuilder:
        """Add a context entry specific to this failure.

        A name this failure already uses is numbered (``expected_2``), so a
        value named like one of the fixed labels keeps its own line.
        """
        self._failure_context[unique_label(name, self._failure_context)] = value
        return self

    def add_diff(
        self, actual_name: str, actual: Any, expected_name: str, expected: Any
    ) -> MessageBuilder:
        """Append a diff between ``actual`` and ``expected``, followed by its legend."""
        configuration = self._validator.configuration
        self._diff.extend(
            diff_sections(
                configuration.string_mappers,
                actual_name,
                actual,
                expected_name,
                expected,
                allow_diff=configuration.allow_diff,
            )
        )
        self._diff.append("")
        self._diff.append(DIFF_LEGEND)
        return self

    def get_context(self) -> Dict[str, Any]:
        """Failure context merged with the validator's context; failure entries win."""
        merged = dict(self._failure_context)
        for name, value in self._validator.get_context().items():
            merged.setdefault(name, value)
        return merged

    def build(self, kind: FailureKind = FailureKind.ILLEGAL_ARGUMENT) -> ValidationFailure:
        return ValidationFailure(kind, str(self), tuple(self.get_context().items()))

    def __str__(self) -> str:
        sections: List[Section] = []
        context = self.get_context()
        if context:
            sections.append(
                render_context_section(context, self._validator.configuration.string_mappers)
            )
        if self._diff:
            if sections or self._message:
                sections.append("")
            sections.extend(self._diff)

        message = self._message
        # Single-line messages without context read as a phrase
        if not sections and "\n" not in message and "," not in message:
            message = message.rstrip(".")
        sections.insert(0, message)
        return render_sections(sections)


def render_context_section(context: Mapping[str, Any], string_mappers: StringMappers) -> Dict[str, str]:
    return {name: string_mappers.to_string(value) for name, value in context.items()}


def render_sections(sections: List[Section]) -> str:
    """Join sections into text, aligning the colons of every context line."""
    width = max(
        (len(name) for section in sections if isinstance(section, dict) for name in section),
        default=0,
    )
    lines: List[str] = []
    for section in sections:
        if isinstance(section, dict):
            lines.extend(f"{name.ljust(width)}: {value}" for name, value in section.items())
        else:
            lines.append(section)
    return "\n".join(lines)


__all__ = ["MessageBuilder", "quote_name", "render_context_section", "render_sections"]
