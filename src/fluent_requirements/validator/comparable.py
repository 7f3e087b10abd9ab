"""Ordering checks for values with a natural ordering."""

from __future__ import annotations

from typing import Any

from typing_extensions import Self

from fluent_requirements.message import comparable_messages
from fluent_requirements.message.builder import MessageBuilder
from fluent_requirements.validator.base import ObjectValidator


class ComparableValidator(ObjectValidator):
    """Validates values that support ``<``, ``<=``, ``>`` and ``>=``.

    Operands may be given a name, in which case messages refer to the
    operand by name and show its value in the context:

    ```python
    require_that("end", end).is_greater_than(start, "start")
    # "end" must be greater than "start".
    # end  : 3
    # start: 5
    ```
    """

    def is_less_than(self, maximum: Any, name: str | None = None) -> Self:
        if not self.is_active() or not self._check_operand(maximum, name, "maximum"):
            return self
        return self._require(
            lambda value: value < maximum,
            lambda: comparable_messages.is_less_than(self, name, maximum),
        )

    def is_less_than_or_equal_to(self, maximum: Any, name: str | None = None) -> Self:
        if not self.is_active() or not self._check_operand(maximum, name, "maximum"):
            return self
        return self._require(
            lambda value: value <= maximum,
            lambda: comparable_messages.is_less_than_or_equal_to(self, name, maximum),
        )

    def is_greater_than(self, minimum: Any, name: str | None = None) -> Self:
        if not self.is_active() or not self._check_operand(minimum, name, "minimum"):
            return self
        return self._require(
            lambda value: value > minimum,
            lambda: comparable_messages.is_greater_than(self, name, minimum),
        )

    def is_greater_than_or_equal_to(self, minimum: Any, name: str | None = None) -> Self:
        if not self.is_active() or not self._check_operand(minimum, name, "minimum"):
            return self
        return self._require(
            lambda value: value >= minimum,
            lambda: comparable_messages.is_greater_than_or_equal_to(self, name, minimum),
        )

    def is_between(
        self,
        minimum: Any,
        maximum: Any,
        minimum_inclusive: bool = True,
        maximum_inclusive: bool = False,
    ) -> Self:
        """Require ``minimum <= value < maximum`` (inclusivity of each end is configurable).

        Args:
            minimum: Lower bound
            maximum: Upper bound
            minimum_inclusive: Whether the value may equal ``minimum``
            maximum_inclusive: Whether the value may equal ``maximum``
        """
        if not self.is_active():
            return self
        minimum_valid = self._check_operand(minimum, None, "minimum")
        maximum_valid = self._check_operand(maximum, None, "maximum")
        if not (minimum_valid and maximum_valid):
            return self

        def in_range(value: Any) -> bool:
            above = value >= minimum if minimum_inclusive else value > minimum
            below = value <= maximum if maximum_inclusive else value < maximum
            return above and below

        return self._require(
            in_range,
            lambda: self._between_message(minimum, minimum_inclusive, maximum, maximum_inclusive),
        )

    def _between_message(
        self, minimum: Any, minimum_inclusive: bool, maximum: Any, maximum_inclusive: bool
    ) -> MessageBuilder:
        return comparable_messages.is_between(
            self, minimum, minimum_inclusive, maximum, maximum_inclusive
        )
