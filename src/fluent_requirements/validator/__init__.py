"""Validators for each family of values.

:func:`validator_for` picks the class from the value's runtime type;
``is_instance_of`` narrows an existing validator to another class.
"""

from fluent_requirements.validator.base import UNDEFINED, ObjectValidator
from fluent_requirements.validator.boolean import BooleanValidator
from fluent_requirements.validator.collection import CollectionValidator
from fluent_requirements.validator.comparable import ComparableValidator
from fluent_requirements.validator.dispatch import (
    validator_class_for_type,
    validator_class_for_value,
    validator_for,
)
from fluent_requirements.validator.dynamic import DynamicValidator
from fluent_requirements.validator.mapping import MappingValidator
from fluent_requirements.validator.number import NumberValidator
from fluent_requirements.validator.path import PathValidator
from fluent_requirements.validator.size import SizeValidator
from fluent_requirements.validator.string import StringValidator
from fluent_requirements.validator.uri import UriValidator

__all__ = [
    "UNDEFINED",
    "BooleanValidator",
    "CollectionValidator",
    "ComparableValidator",
    "DynamicValidator",
    "MappingValidator",
    "NumberValidator",
    "ObjectValidator",
    "PathValidator",
    "SizeValidator",
    "StringValidator",
    "UriValidator",
    "validator_class_for_type",
    "validator_class_for_value",
    "validator_for",
]
