"""Validator for values that are None when validation starts."""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MethodType
from typing import Any, Callable, FrozenSet

from fluent_requirements.tracebacks import cleans_traceback
from fluent_requirements.validator.base import ObjectValidator

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def capability_methods() -> FrozenSet[str]:
    """Public methods of the capability validators that ObjectValidator lacks."""
    from fluent_requirements.validator.boolean import BooleanValidator
    from fluent_requirements.validator.collection import CollectionValidator
    from fluent_requirements.validator.mapping import MappingValidator
    from fluent_requirements.validator.path import PathValidator
    from fluent_requirements.validator.size import SizeValidator
    from fluent_requirements.validator.string import StringValidator
    from fluent_requirements.validator.uri import UriValidator

    names = set()
    for cls in (
        BooleanValidator,
        SizeValidator,
        StringValidator,
        CollectionValidator,
        MappingValidator,
        PathValidator,
        UriValidator,
    ):
        for name in dir(cls):
            if not name.startswith("_") and callable(getattr(cls, name)):
                names.add(name)
    return frozenset(names - set(dir(ObjectValidator)))


class DynamicValidator(ObjectValidator):
    """Stands in for every capability when the value is None.

    The type of a None value says nothing about the checks the caller will
    chain, so this validator accepts any of them. The first check records
    the null failure and short-circuits; the rest are no-ops. Checks defined
    by ObjectValidator keep their usual behavior, so ``is_none()`` passes.

    ```python
    check_if("timeout", None).is_positive().is_less_than(30).else_get_messages()
    # ['"timeout" may not be None.']
    ```
    """

    def __getattr__(self, name: str) -> Callable[..., DynamicValidator]:
        if name.startswith("_") or name not in capability_methods():
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            )

        def check(validator: DynamicValidator, *args: Any, **kwargs: Any) -> DynamicValidator:
            if validator.is_active():
                logger.debug("%s() called on None value of %s", name, validator.name)
                validator._fail_null()
            return validator

        check.__name__ = name
        return MethodType(cleans_traceback(check), self)


__all__ = ["DynamicValidator", "capability_methods"]
