"""Checks for ``str`` values."""

from __future__ import annotations

import re
from typing import Pattern, Union
from urllib.parse import urlsplit

from typing_extensions import Self

from fluent_requirements.message import object_messages, string_messages
from fluent_requirements.message.pluralizer import Pluralizer
from fluent_requirements.validator.base import UNDEFINED, internal_validator
from fluent_requirements.validator.comparable import ComparableValidator
from fluent_requirements.validator.size import SizeValidator
from fluent_requirements.validator.uri import UriValidator


class StringValidator(ComparableValidator):
    """Validates strings."""

    def is_empty(self) -> Self:
        return self._require(lambda value: value == "", lambda: object_messages.is_empty(self))

    def is_not_empty(self) -> Self:
        return self._require(lambda value: value != "", lambda: object_messages.is_not_empty(self))

    def is_blank(self) -> Self:
        """Require the value to be empty or contain only whitespace."""
        return self._require(lambda value: not value.strip(), lambda: string_messages.is_blank(self))

    def is_not_blank(self) -> Self:
        return self._require(
            lambda value: bool(value.strip()), lambda: string_messages.is_not_blank(self)
        )

    def is_trimmed(self) -> Self:
        """Require the value to have no leading or trailing whitespace."""
        return self._require(
            lambda value: value == value.strip(), lambda: string_messages.is_trimmed(self)
        )

    def does_not_contain_whitespace(self) -> Self:
        return self._require(
            lambda value: not any(character.isspace() for character in value),
            lambda: string_messages.does_not_contain_whitespace(self),
        )

    def starts_with(self, prefix: str) -> Self:
        if not self._accepts_text_operand(prefix, "prefix"):
            return self
        return self._require(
            lambda value: value.startswith(prefix), lambda: string_messages.starts_with(self, prefix)
        )

    def does_not_start_with(self, prefix: str) -> Self:
        if not self._accepts_text_operand(prefix, "prefix"):
            return self
        return self._require(
            lambda value: not value.startswith(prefix),
            lambda: string_messages.does_not_start_with(self, prefix),
        )

    def ends_with(self, suffix: str) -> Self:
        if not self._accepts_text_operand(suffix, "suffix"):
            return self
        return self._require(
            lambda value: value.endswith(suffix), lambda: string_messages.ends_with(self, suffix)
        )

    def does_not_end_with(self, suffix: str) -> Self:
        if not self._accepts_text_operand(suffix, "suffix"):
            return self
        return self._require(
            lambda value: not value.endswith(suffix),
            lambda: string_messages.does_not_end_with(self, suffix),
        )

    def contains(self, expected: str) -> Self:
        if not self._accepts_text_operand(expected, "expected"):
            return self
        return self._require(
            lambda value: expected in value, lambda: string_messages.contains(self, expected)
        )

    def does_not_contain(self, unwanted: str) -> Self:
        if not self._accepts_text_operand(unwanted, "unwanted"):
            return self
        return self._require(
            lambda value: unwanted not in value,
            lambda: string_messages.does_not_contain(self, unwanted),
        )

    def matches(self, pattern: Union[str, Pattern[str]]) -> Self:
        """Require the entire value to match ``pattern``."""
        internal_validator("pattern", pattern).is_instance_of((str, re.Pattern))
        compiled = re.compile(pattern)
        return self._require(
            lambda value: compiled.fullmatch(value) is not None,
            lambda: string_messages.matches(self, compiled.pattern),
        )

    def length(self) -> SizeValidator:
        """Return a validator for the number of characters."""
        return self._size(Pluralizer.CHARACTER)

    def as_uri(self) -> UriValidator:
        """Parse the value as a URI and return a validator for the result.

        A value that cannot be parsed short-circuits the chain.
        """
        if not self.is_active():
            return self._derive(UriValidator, self._name, UNDEFINED)
        if self._value is None:
            self._fail_null()
            return self._derive(UriValidator, self._name, UNDEFINED)
        try:
            uri = urlsplit(self._value)
        except ValueError as error:
            failure = string_messages.is_uri(self, error).build()
            self._short_circuit()
            self._add_failure(failure)
            return self._derive(UriValidator, self._name, UNDEFINED)
        return self._derive(UriValidator, self._name, uri)

    def _accepts_text_operand(self, operand: str, label: str) -> bool:
        if not self.is_active() or not self._check_operand(operand, None, label):
            return False
        internal_validator(label, operand).is_instance_of(str)
        return True
