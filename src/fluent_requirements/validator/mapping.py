"""Checks for dictionaries and other mappings."""

from __future__ import annotations

from typing import Any, Callable

from typing_extensions import Self

from fluent_requirements.message import object_messages
from fluent_requirements.message.pluralizer import Pluralizer
from fluent_requirements.validator.base import UNDEFINED, ObjectValidator
from fluent_requirements.validator.collection import CollectionValidator
from fluent_requirements.validator.size import SizeValidator


class MappingValidator(ObjectValidator):
    """Validates mappings.

    ``keys()``, ``values()`` and ``items()`` return collection validators
    named after the expression, e.g. ``settings.keys()``:

    ```python
    require_that("settings", settings).keys().contains_all(["host", "port"])
    ```
    """

    def is_empty(self) -> Self:
        return self._require(lambda value: len(value) == 0, lambda: object_messages.is_empty(self))

    def is_not_empty(self) -> Self:
        return self._require(lambda value: len(value) != 0, lambda: object_messages.is_not_empty(self))

    def size(self) -> SizeValidator:
        """Return a validator for the number of entries."""
        return self._size(Pluralizer.ENTRY)

    def keys(self) -> CollectionValidator:
        return self._view("keys", lambda mapping: list(mapping.keys()), Pluralizer.KEY)

    def values(self) -> CollectionValidator:
        return self._view("values", lambda mapping: list(mapping.values()), Pluralizer.VALUE)

    def items(self) -> CollectionValidator:
        return self._view("items", lambda mapping: list(mapping.items()), Pluralizer.ENTRY)

    def _view(
        self, method: str, extract: Callable[[Any], list], pluralizer: Pluralizer
    ) -> CollectionValidator:
        if self.is_active() and self._value is None:
            self._fail_null()
        view = extract(self._value) if self.is_active() else UNDEFINED
        return CollectionValidator(
            f"{self._name}.{method}()",
            view,
            self._configuration,
            self._failures,
            self._context,
            pluralizer=pluralizer,
        )
