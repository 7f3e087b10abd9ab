"""Numeric checks for ``int``, ``float``, ``Decimal`` and ``Fraction`` values.

Sign checks treat NaN as neither positive nor negative, so
``is_not_positive`` and ``is_not_negative`` pass for NaN.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any

from typing_extensions import Self

from fluent_requirements.message import number_messages
from fluent_requirements.validator.comparable import ComparableValidator


def is_nan(value: Any) -> bool:
    if isinstance(value, numbers.Integral):
        return False
    if isinstance(value, Decimal):
        return value.is_nan()
    return math.isnan(value)


def is_infinite(value: Any) -> bool:
    if isinstance(value, numbers.Integral):
        return False
    if isinstance(value, Decimal):
        return value.is_infinite()
    return math.isinf(value)


def is_positive(value: Any) -> bool:
    return not is_nan(value) and value > 0


def is_negative(value: Any) -> bool:
    return not is_nan(value) and value < 0


def is_whole(value: Any) -> bool:
    return not is_nan(value) and not is_infinite(value) and value % 1 == 0


def is_multiple(value: Any, factor: Any) -> bool:
    # Nothing is a multiple of zero
    if factor == 0:
        return False
    return value == 0 or value % factor == 0


class NumberValidator(ComparableValidator):
    """Validates numbers."""

    def is_zero(self) -> Self:
        return self._require(lambda value: value == 0, lambda: number_messages.is_zero(self))

    def is_not_zero(self) -> Self:
        return self._require(lambda value: value != 0, lambda: number_messages.is_not_zero(self))

    def is_positive(self) -> Self:
        return self._require(is_positive, lambda: number_messages.is_positive(self))

    def is_not_positive(self) -> Self:
        return self._require(
            lambda value: not is_positive(value), lambda: number_messages.is_not_positive(self)
        )

    def is_negative(self) -> Self:
        return self._require(is_negative, lambda: number_messages.is_negative(self))

    def is_not_negative(self) -> Self:
        return self._require(
            lambda value: not is_negative(value), lambda: number_messages.is_not_negative(self)
        )

    def is_multiple_of(self, factor: Any, name: str | None = None) -> Self:
        """Require the value to be a multiple of ``factor``.

        Zero is a multiple of every non-zero factor; no value is a multiple
        of zero.
        """
        if not self.is_active() or not self._check_operand(factor, name, "factor"):
            return self
        return self._require(
            lambda value: is_multiple(value, factor),
            lambda: number_messages.is_multiple_of(self, name, factor),
        )

    def is_not_multiple_of(self, factor: Any, name: str | None = None) -> Self:
        if not self.is_active() or not self._check_operand(factor, name, "factor"):
            return self
        return self._require(
            lambda value: not is_multiple(value, factor),
            lambda: number_messages.is_not_multiple_of(self, name, factor),
        )

    def is_whole_number(self) -> Self:
        return self._require(is_whole, lambda: number_messages.is_whole_number(self))

    def is_not_whole_number(self) -> Self:
        return self._require(
            lambda value: not is_whole(value), lambda: number_messages.is_not_whole_number(self)
        )

    def is_number(self) -> Self:
        """Require the value not to be NaN."""
        return self._require(lambda value: not is_nan(value), lambda: number_messages.is_number(self))

    def is_not_number(self) -> Self:
        """Require the value to be NaN."""
        return self._require(is_nan, lambda: number_messages.is_not_number(self))

    def is_finite(self) -> Self:
        return self._require(
            lambda value: not is_nan(value) and not is_infinite(value),
            lambda: number_messages.is_finite(self),
        )

    def is_infinite(self) -> Self:
        return self._require(is_infinite, lambda: number_messages.is_infinite(self))
