"""Validator for the size of a container."""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from typing_extensions import Self

from fluent_requirements.configuration import Configuration
from fluent_requirements.failures import ValidationFailure
from fluent_requirements.message import collection_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.message.pluralizer import Pluralizer
from fluent_requirements.validator.base import ObjectValidator
from fluent_requirements.validator.number import NumberValidator


class SizeValidator(NumberValidator):
    """Validates ``len(container)``, describing failures in terms of the container.

    Returned by ``size()`` and ``length()``; not created directly.

    Args:
        name: Name of the size, e.g. ``len(items)``
        value: The size
        configuration: Configuration shared with the container's validator
        failures: Failure list shared with the container's validator
        context: Context inherited from the container's validator
        parent: Validator of the container
        pluralizer: Noun used for the container's items
    """

    def __init__(
        self,
        name: str,
        value: Any,
        configuration: Configuration | None = None,
        failures: List[ValidationFailure] | None = None,
        context: Dict[str, Any] | None = None,
        parent: ObjectValidator | None = None,
        pluralizer: Pluralizer = Pluralizer.ELEMENT,
    ) -> None:
        super().__init__(name, value, configuration, failures, context)
        self._parent = parent if parent is not None else self
        self._pluralizer = pluralizer

    @property
    def parent(self) -> ObjectValidator:
        return self._parent

    @property
    def pluralizer(self) -> Pluralizer:
        return self._pluralizer

    def is_equal_to(self, expected: Any, name: str | None = None) -> Self:
        return self._compare_size(
            lambda size: size == expected, "must contain exactly", expected, name
        )

    def is_not_equal_to(self, unwanted: Any, name: str | None = None) -> Self:
        return self._compare_size(
            lambda size: size != unwanted, "may not contain exactly", unwanted, name
        )

    def is_less_than(self, maximum: Any, name: str | None = None) -> Self:
        return self._compare_size(lambda size: size < maximum, "must contain fewer than", maximum, name)

    def is_less_than_or_equal_to(self, maximum: Any, name: str | None = None) -> Self:
        return self._compare_size(lambda size: size <= maximum, "must contain at most", maximum, name)

    def is_greater_than(self, minimum: Any, name: str | None = None) -> Self:
        return self._compare_size(lambda size: size > minimum, "must contain more than", minimum, name)

    def is_greater_than_or_equal_to(self, minimum: Any, name: str | None = None) -> Self:
        return self._compare_size(lambda size: size >= minimum, "must contain at least", minimum, name)

    def _compare_size(
        self, passes: Callable[[Any], bool], relationship: str, count: Any, name: str | None
    ) -> Self:
        if not self.is_active() or not self._check_operand(count, name, "count"):
            return self
        return self._require(
            passes, lambda: collection_messages.size_compare(self, relationship, name, count)
        )

    def _between_message(
        self, minimum: Any, minimum_inclusive: bool, maximum: Any, maximum_inclusive: bool
    ) -> MessageBuilder:
        return collection_messages.size_is_between(
            self, minimum, minimum_inclusive, maximum, maximum_inclusive
        )
