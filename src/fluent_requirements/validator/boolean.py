"""Checks for ``bool`` values."""

from __future__ import annotations

from typing_extensions import Self

from fluent_requirements.message import object_messages
from fluent_requirements.validator.base import ObjectValidator


class BooleanValidator(ObjectValidator):
    """Validates ``bool`` values."""

    def is_true(self) -> Self:
        return self._require(lambda value: value is True, lambda: object_messages.is_true(self))

    def is_false(self) -> Self:
        return self._require(lambda value: value is False, lambda: object_messages.is_false(self))
