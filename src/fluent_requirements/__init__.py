"""Fluent validation of method arguments, values and invariants.

This package provides:

- **Entry points**: ``require_that`` (fail-fast), ``check_if``
  (collect every failure) and ``assert_that`` (AssertionError)
- **Validators**: chainable checks for objects, numbers, strings,
  collections, mappings, paths and URIs
- **Configuration**: immutable policy for equality, rendering, diffs and
  exception mapping, loadable from YAML/JSON settings
- **Exceptions**: a hierarchy rooted at ``RequirementsError`` that carries
  the context of each failure

Example:
    ```python
    from fluent_requirements import check_if, require_that

    require_that("name", name).is_not_blank().length().is_less_than_or_equal_to(64)

    failures = (
        check_if("port", port)
        .is_instance_of(int)
        .is_between(1, 65536)
        .else_get_failures()
    )
    ```
"""

from fluent_requirements.configuration import Configuration, EqualityMethod
from fluent_requirements.difference import SetDifference
from fluent_requirements.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateError,
    MultipleFailuresError,
    NullValueError,
    RequirementsError,
    ValidationError,
    ValueUnavailableError,
)
from fluent_requirements.failures import FailureAggregate, FailureKind, ValidationFailure
from fluent_requirements.settings import load_configuration
from fluent_requirements.string_mappers import StringMappers, UnquotedStringValue
from fluent_requirements.validators import Validators, assert_that, check_if, require_that

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Entry points
    "Validators",
    "require_that",
    "check_if",
    "assert_that",
    # Configuration
    "Configuration",
    "EqualityMethod",
    "StringMappers",
    "UnquotedStringValue",
    "load_configuration",
    # Failures
    "FailureAggregate",
    "FailureKind",
    "ValidationFailure",
    "SetDifference",
    # Exceptions
    "RequirementsError",
    "ConfigurationError",
    "ValidationError",
    "NullValueError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MultipleFailuresError",
    "ValueUnavailableError",
]
