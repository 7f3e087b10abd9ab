"""Character-level diffs between the rendered forms of two values.

:class:`DiffGenerator` aligns the lines of two strings, then diffs each
pair of lines character by character using :mod:`difflib`. Each line pair
produces three aligned rows:

- ``actual``: the actual text, padded where characters must be inserted
- ``diff``: ``-`` where a character must be removed, ``+`` where one must
  be added, and a space where the texts agree
- ``expected``: the expected text, padded where characters must be removed

:func:`diff_sections` turns those rows into message sections, naming the
rows of multi-line values ``name@line`` and the elements of lists
``name[index]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from difflib import SequenceMatcher
from itertools import zip_longest
from typing import TYPE_CHECKING, Any, Collection, Dict, List, Optional, Tuple, Union

from fluent_requirements.string_mappers import StringMappers

if TYPE_CHECKING:
    from fluent_requirements.message.builder import Section

DIFF_LEGEND = (
    "Legend\n"
    "------\n"
    "+           : Add this character to the value\n"
    "-           : Remove this character from the value\n"
    "[index]     : Refers to the index of a collection element\n"
    "@line-number: Refers to the line number of a multiline string"
)

SKIPPED_LINES = "[...]"


@dataclass
class DiffResult:
    """Aligned rows of a diff; ``None`` marks a line missing on one side."""

    actual_lines: List[Optional[str]] = field(default_factory=list)
    diff_lines: List[str] = field(default_factory=list)
    expected_lines: List[Optional[str]] = field(default_factory=list)
    equal_lines: List[bool] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.equal_lines)


class DiffGenerator:
    """Generates line-aligned character diffs."""

    def diff(self, actual: str, expected: str) -> DiffResult:
        result = DiffResult()
        actual_lines = actual.split("\n")
        expected_lines = expected.split("\n")
        matcher = SequenceMatcher(None, actual_lines, expected_lines, autojunk=False)
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                for line in actual_lines[i1:i2]:
                    self._append(result, line, line)
            else:
                for actual_line, expected_line in zip_longest(
                    actual_lines[i1:i2], expected_lines[j1:j2]
                ):
                    self._append(result, actual_line, expected_line)
        return result

    def _append(
        self, result: DiffResult, actual: Optional[str], expected: Optional[str]
    ) -> None:
        if actual == expected:
            result.actual_lines.append(actual)
            result.diff_lines.append("")
            result.expected_lines.append(expected)
            result.equal_lines.append(True)
            return
        padded_actual, diff, padded_expected = diff_line(actual or "", expected or "")
        result.actual_lines.append(None if actual is None else padded_actual)
        result.diff_lines.append(diff)
        result.expected_lines.append(None if expected is None else padded_expected)
        result.equal_lines.append(False)


def diff_line(actual: str, expected: str) -> Tuple[str, str, str]:
    """Diff two single-line strings.

    Returns:
        The padded actual text, the diff row and the padded expected text
    """
    actual_row: List[str] = []
    diff_row: List[str] = []
    expected_row: List[str] = []
    matcher = SequenceMatcher(None, actual, expected, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            segment = actual[i1:i2]
            actual_row.append(segment)
            expected_row.append(segment)
            diff_row.append(" " * len(segment))
            continue
        if tag in ("delete", "replace"):
            segment = actual[i1:i2]
            actual_row.append(segment)
            expected_row.append(" " * len(segment))
            diff_row.append("-" * len(segment))
        if tag in ("insert", "replace"):
            segment = expected[j1:j2]
            actual_row.append(" " * len(segment))
            expected_row.append(segment)
            diff_row.append("+" * len(segment))
    return "".join(actual_row), "".join(diff_row).rstrip(), "".join(expected_row)


def diff_sections(
    string_mappers: StringMappers,
    actual_name: str,
    actual: Any,
    expected_name: str,
    expected: Any,
    allow_diff: bool = True,
) -> List[Section]:
    """Describe how ``actual`` differs from ``expected`` as message sections."""
    if isinstance(actual, list) and isinstance(expected, list):
        return _list_sections(string_mappers, actual_name, actual, expected_name, expected, allow_diff)
    return _object_sections(string_mappers, actual_name, actual, expected_name, expected, allow_diff)


def _list_sections(
    string_mappers: StringMappers,
    actual_name: str,
    actual: List[Any],
    expected_name: str,
    expected: List[Any],
    allow_diff: bool,
) -> List[Section]:
    sections: List[Section] = []
    total = max(len(actual), len(expected))
    skipped = False
    for index in range(total):
        has_actual = index < len(actual)
        has_expected = index < len(expected)
        equal = has_actual and has_expected and actual[index] == expected[index]
        if equal and 0 < index < total - 1:
            skipped = True
            continue
        if skipped:
            skipped = False
            sections.append(SKIPPED_LINES)
        if sections:
            sections.append("")
        sections.extend(
            _object_sections(
                string_mappers,
                f"{actual_name}[{index}]" if has_actual else actual_name,
                actual[index] if has_actual else _MISSING,
                f"{expected_name}[{index}]" if has_expected else expected_name,
                expected[index] if has_expected else _MISSING,
                allow_diff,
            )
        )
    return sections


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


_MISSING = _Missing()


def _render(string_mappers: StringMappers, value: Any) -> str:
    return "" if value is _MISSING else string_mappers.to_string(value)


def _object_sections(
    string_mappers: StringMappers,
    actual_name: str,
    actual: Any,
    expected_name: str,
    expected: Any,
    allow_diff: bool,
) -> List[Section]:
    actual_text = _render(string_mappers, actual)
    expected_text = _render(string_mappers, expected)
    result = DiffGenerator().diff(actual_text, expected_text)
    if not allow_diff or isinstance(actual, bool) or isinstance(expected, bool):
        return [_row(actual_name, actual_text, "", expected_name, expected_text)]

    if len(result) == 1:
        sections: List[Section] = [
            _row(
                actual_name,
                result.actual_lines[0] or "",
                result.diff_lines[0],
                expected_name,
                result.expected_lines[0] or "",
            )
        ]
        if actual_text == expected_text and actual is not expected:
            explanation = _explain_identical_text(actual_name, actual, expected_name, expected)
            if explanation:
                sections.append("")
                sections.append(explanation)
        return sections

    sections = []
    actual_line_number = 0
    expected_line_number = 0
    skipped = False
    for index in range(len(result)):
        actual_line = result.actual_lines[index]
        expected_line = result.expected_lines[index]
        equal = result.equal_lines[index]
        if equal and 0 < index < len(result) - 1:
            skipped = True
            actual_line_number += 1
            expected_line_number += 1
            continue
        if skipped:
            skipped = False
            sections.append(SKIPPED_LINES)
        if sections:
            sections.append("")
        if actual_line is None:
            actual_row_name = actual_name
        else:
            actual_row_name = f"{actual_name}@{actual_line_number}"
            actual_line_number += 1
        if expected_line is None:
            expected_row_name = expected_name
        else:
            expected_row_name = f"{expected_name}@{expected_line_number}"
            expected_line_number += 1
        sections.append(
            _row(
                actual_row_name,
                actual_line or "",
                "" if equal else result.diff_lines[index],
                expected_row_name,
                expected_line or "",
            )
        )
    return sections


def unique_label(label: str, taken: Collection[str]) -> str:
    """Return ``label``, numbered ``label_2``, ``label_3``... if it is already taken."""
    candidate = label
    number = 1
    while candidate in taken:
        number += 1
        candidate = f"{label}_{number}"
    return candidate


def _row(
    actual_name: str, actual: str, diff: str, expected_name: str, expected: str
) -> Dict[str, str]:
    row = {actual_name: actual}
    if diff:
        row[unique_label("diff", (actual_name, expected_name))] = diff
    row[expected_name] = expected
    return row


def _explain_identical_text(
    actual_name: str, actual: Any, expected_name: str, expected: Any
) -> Union[Dict[str, str], None]:
    """Tell apart values whose rendered text is identical."""
    actual_type = _qualified_name(type(actual))
    expected_type = _qualified_name(type(expected))
    if actual_type != expected_type:
        return {f"type({actual_name})": actual_type, f"type({expected_name})": expected_type}
    return {f"id({actual_name})": str(id(actual)), f"id({expected_name})": str(id(expected))}


def _qualified_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


__all__ = [
    "DIFF_LEGEND",
    "DiffGenerator",
    "DiffResult",
    "diff_line",
    "diff_sections",
    "unique_label",
]
