"""Selects the validator class for a value or a type."""

from __future__ import annotations

import numbers
from collections.abc import Collection, Mapping
from decimal import Decimal
from pathlib import PurePath
from typing import Any, List, Tuple, Type
from urllib.parse import ParseResult, SplitResult

from fluent_requirements.configuration import Configuration
from fluent_requirements.validator.base import ClassInfo, ObjectValidator
from fluent_requirements.validator.boolean import BooleanValidator
from fluent_requirements.validator.collection import CollectionValidator
from fluent_requirements.validator.comparable import ComparableValidator
from fluent_requirements.validator.dynamic import DynamicValidator
from fluent_requirements.validator.mapping import MappingValidator
from fluent_requirements.validator.number import NumberValidator
from fluent_requirements.validator.path import PathValidator
from fluent_requirements.validator.string import StringValidator
from fluent_requirements.validator.uri import UriValidator

# Checked in order; the first matching entry wins. bool precedes the numbers
# and parsed URIs (tuples) precede Collection.
_DISPATCH: List[Tuple[Tuple[type, ...], Type[ObjectValidator]]] = [
    ((bool,), BooleanValidator),
    ((numbers.Real, Decimal), NumberValidator),
    ((str,), StringValidator),
    ((PurePath,), PathValidator),
    ((SplitResult, ParseResult), UriValidator),
    ((Mapping,), MappingValidator),
    ((Collection,), CollectionValidator),
]


def _is_ordered(cls: type) -> bool:
    return getattr(cls, "__lt__", object.__lt__) is not object.__lt__


def validator_class_for_type(classinfo: ClassInfo) -> Type[ObjectValidator]:
    """Return the validator class with the capabilities of ``classinfo``.

    For a tuple of types, the class shared by all members is used, or
    ObjectValidator when the members need different capabilities.
    """
    if isinstance(classinfo, tuple):
        classes = {validator_class_for_type(member) for member in classinfo}
        return classes.pop() if len(classes) == 1 else ObjectValidator
    for types, validator_class in _DISPATCH:
        if issubclass(classinfo, types):
            return validator_class
    if _is_ordered(classinfo):
        return ComparableValidator
    return ObjectValidator


def validator_class_for_value(value: Any) -> Type[ObjectValidator]:
    if value is None:
        return DynamicValidator
    return validator_class_for_type(type(value))


def validator_for(
    name: str, value: Any, configuration: Configuration | None = None
) -> ObjectValidator:
    """Create the validator for ``value``, chosen by its runtime type.

    Example:
        ```python
        validator_for("port", 8080)        # NumberValidator
        validator_for("hosts", ["a", "b"]) # CollectionValidator
        validator_for("token", None)       # DynamicValidator
        ```
    """
    return validator_class_for_value(value)(name, value, configuration)


__all__ = ["validator_class_for_type", "validator_class_for_value", "validator_for"]
