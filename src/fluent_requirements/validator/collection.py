"""Checks for lists, tuples, sets and other sized iterables."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Callable, Dict, Iterable, List

from typing_extensions import Self

from fluent_requirements.configuration import Configuration
from fluent_requirements.difference import SetDifference, find_duplicates
from fluent_requirements.failures import ValidationFailure
from fluent_requirements.message import collection_messages, object_messages
from fluent_requirements.message.pluralizer import Pluralizer
from fluent_requirements.validator.base import ObjectValidator
from fluent_requirements.validator.size import SizeValidator


class CollectionValidator(ObjectValidator):
    """Validates collections.

    Containment checks compare elements with the configured equality
    method and treat their operands as sets:

    ```python
    check_if("roles", ["admin", "dev"]).contains_all(["admin", "ops"])
    # "roles" must contain all of ["admin", "ops"].
    # roles  : ["admin", "dev"]
    # missing: ["ops"]
    ```

    Args:
        pluralizer: Noun used for the elements in size messages
    """

    def __init__(
        self,
        name: str,
        value: Any,
        configuration: Configuration | None = None,
        failures: List[ValidationFailure] | None = None,
        context: Dict[str, Any] | None = None,
        pluralizer: Pluralizer = Pluralizer.ELEMENT,
    ) -> None:
        super().__init__(name, value, configuration, failures, context)
        self._pluralizer = pluralizer

    @property
    def pluralizer(self) -> Pluralizer:
        return self._pluralizer

    def is_empty(self) -> Self:
        return self._require(lambda value: len(value) == 0, lambda: object_messages.is_empty(self))

    def is_not_empty(self) -> Self:
        return self._require(lambda value: len(value) != 0, lambda: object_messages.is_not_empty(self))

    def size(self) -> SizeValidator:
        """Return a validator for the number of elements."""
        return self._size(self._pluralizer)

    def contains(self, element: Any, name: str | None = None) -> Self:
        if not self.is_active():
            return self
        if name is not None:
            self._require_that_name_is_unique(name)
        return self._require(
            lambda value: self._contains(value, element),
            lambda: collection_messages.contains(self, name, element),
        )

    def does_not_contain(self, element: Any, name: str | None = None) -> Self:
        if not self.is_active():
            return self
        if name is not None:
            self._require_that_name_is_unique(name)
        return self._require(
            lambda value: not self._contains(value, element),
            lambda: collection_messages.does_not_contain(self, name, element),
        )

    def contains_any(self, expected: Iterable[Any], name: str | None = None) -> Self:
        if not self._prepare(expected, name, "expected"):
            return self
        expected = _materialize(expected)
        difference = self._difference(expected)
        return self._require(
            lambda value: bool(difference.common),
            lambda: collection_messages.contains_any(self, name, expected),
        )

    def does_not_contain_any(self, unwanted: Iterable[Any], name: str | None = None) -> Self:
        if not self._prepare(unwanted, name, "unwanted"):
            return self
        unwanted = _materialize(unwanted)
        difference = self._difference(unwanted)
        return self._require(
            lambda value: not difference.common,
            lambda: collection_messages.does_not_contain_any(
                self, name, unwanted, difference.common
            ),
        )

    def contains_all(self, expected: Iterable[Any], name: str | None = None) -> Self:
        if not self._prepare(expected, name, "expected"):
            return self
        expected = _materialize(expected)
        difference = self._difference(expected)
        return self._require(
            lambda value: not difference.only_in_other,
            lambda: collection_messages.contains_all(
                self, name, expected, difference.only_in_other
            ),
        )

    def does_not_contain_all(self, unwanted: Iterable[Any], name: str | None = None) -> Self:
        if not self._prepare(unwanted, name, "unwanted"):
            return self
        unwanted = _materialize(unwanted)
        difference = self._difference(unwanted)
        return self._require(
            lambda value: bool(difference.only_in_other),
            lambda: collection_messages.does_not_contain_all(self, name, unwanted),
        )

    def contains_exactly(self, expected: Iterable[Any], name: str | None = None) -> Self:
        """Require the value and ``expected`` to hold the same elements, in any order."""
        if not self._prepare(expected, name, "expected"):
            return self
        expected = _materialize(expected)
        difference = self._difference(expected)
        return self._require(
            lambda value: difference.are_equal,
            lambda: collection_messages.contains_exactly(
                self, name, expected, difference.only_in_other, difference.only_in_actual
            ),
        )

    def does_not_contain_exactly(self, unwanted: Iterable[Any], name: str | None = None) -> Self:
        if not self._prepare(unwanted, name, "unwanted"):
            return self
        unwanted = _materialize(unwanted)
        difference = self._difference(unwanted)
        return self._require(
            lambda value: not difference.are_equal,
            lambda: collection_messages.does_not_contain_exactly(self, name, unwanted),
        )

    def does_not_contain_duplicates(self) -> Self:
        if not self.is_active():
            return self
        if self._value is None:
            self._fail_null()
            return self
        duplicates = find_duplicates(self._value, self._configuration.equality_method)
        return self._require(
            lambda value: not duplicates,
            lambda: collection_messages.does_not_contain_duplicates(self, duplicates),
        )

    def is_sorted(self, key: Callable[[Any], Any] | None = None, reverse: bool = False) -> Self:
        """Require the elements to be in the order ``sorted(value, key=key, reverse=reverse)`` gives."""
        if not self.is_active():
            return self
        if self._value is None:
            self._fail_null()
            return self
        reason: str | None = None
        try:
            expected = sorted(self._value, key=key, reverse=reverse)
        except TypeError as e:
            expected, reason = [], str(e)
        if reason is not None:
            return self._require(
                lambda value: False,
                lambda: collection_messages.is_sortable(self, reason),
            )
        return self._require(
            lambda value: list(value) == expected,
            lambda: collection_messages.is_sorted(self, expected),
        )

    def _prepare(self, operand: Any, name: str | None, default_name: str) -> bool:
        """Check the operand and the value of a containment check.

        Returns:
            True if the check should be evaluated
        """
        if not self.is_active() or not self._check_operand(operand, name, default_name):
            return False
        if self._value is None:
            self._fail_null()
            return False
        return True

    def _contains(self, value: Iterable[Any], element: Any) -> bool:
        equality = self._configuration.equality_method
        return any(equality.equals(candidate, element) for candidate in value)

    def _difference(self, other: Iterable[Any]) -> SetDifference:
        return SetDifference.of(self._value, other, self._configuration.equality_method)


def _materialize(operand: Iterable[Any]) -> Collection[Any]:
    """Return ``operand`` as a collection, so iterators are consumed only once."""
    if isinstance(operand, Collection):
        return operand
    return list(operand)
