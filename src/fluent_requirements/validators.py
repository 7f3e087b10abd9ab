"""Entry points for starting validation chains.

A :class:`Validators` object holds a :class:`Configuration` and creates
validators from it. Three flavors are offered:

- ``require_that``: raise on the first failure (argument checks)
- ``check_if``: collect every failure, then inspect or raise them
- ``assert_that``: like ``require_that``, but failures surface as
  ``AssertionError`` (internal invariants)

The module-level functions delegate to a default instance created at
import time.

Example:
    ```python
    from fluent_requirements import Validators, check_if, require_that

    def connect(host: str, port: int) -> None:
        require_that("host", host).is_not_blank()
        require_that("port", port).is_between(1, 65536)

    messages = (
        check_if("name", "")
        .is_not_empty()
        .else_get_messages()
    )

    audit = Validators().with_context("orders", "table")
    audit.require_that("rows", rows).is_not_empty()
    ```
"""

from __future__ import annotations

from typing import Any, Dict

from typing_extensions import Self

from fluent_requirements.configuration import Configuration, ExceptionTransformer
from fluent_requirements.exceptions import ConfigurationError
from fluent_requirements.tracebacks import cleans_traceback
from fluent_requirements.validator.base import ObjectValidator
from fluent_requirements.validator.dispatch import validator_for


def _assertion_transformer(transformer: ExceptionTransformer) -> ExceptionTransformer:
    """Wrap ``transformer`` so that its result is raised as an AssertionError."""

    def transform(exception: BaseException) -> BaseException:
        transformed = transformer(exception)
        if transformed is None:
            transformed = exception
        if isinstance(transformed, AssertionError) or not isinstance(transformed, BaseException):
            return transformed
        assertion = AssertionError(str(transformed))
        assertion.__cause__ = transformed
        return assertion

    return transform


class Validators:
    """Creates validators that share one configuration.

    Args:
        configuration: Configuration for every validator this object
            creates (defaults to ``Configuration()``)
    """

    def __init__(self, configuration: Configuration | None = None) -> None:
        self._configuration = configuration if configuration is not None else Configuration()

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def __repr__(self) -> str:
        return f"Validators({self._configuration!r})"

    @cleans_traceback
    def require_that(self, name: str, value: Any) -> ObjectValidator:
        """Validate a method argument, raising on the first failure.

        Raises:
            NullValueError: If ``name`` is None
            InvalidArgumentError: If ``name`` is empty or contains whitespace
        """
        return validator_for(name, value, self._configuration.with_throw_on_failure(True))

    @cleans_traceback
    def check_if(self, name: str, value: Any) -> ObjectValidator:
        """Validate a value, collecting failures until a terminal call.

        Example:
            ```python
            failures = check_if("age", -1).is_not_negative().else_get_failures()
            ```
        """
        return validator_for(name, value, self._configuration.with_throw_on_failure(False))

    @cleans_traceback
    def assert_that(self, name: str, value: Any) -> ObjectValidator:
        """Validate an internal invariant, raising ``AssertionError`` on the first failure.

        When Python runs with ``-O`` assertions are disabled: failures are
        collected instead of raised and only surface through the chain's
        terminal calls.
        """
        configuration = self._configuration.with_exception_transformer(
            _assertion_transformer(self._configuration.exception_transformer)
        ).with_throw_on_failure(__debug__)
        return validator_for(name, value, configuration)

    @cleans_traceback
    def with_configuration(self, configuration: Configuration) -> Self:
        """Return validators that use ``configuration``.

        Raises:
            ConfigurationError: If ``configuration`` is None
        """
        if configuration is None:
            raise ConfigurationError("configuration may not be None.")
        if configuration is self._configuration:
            return self
        return type(self)(configuration)

    @cleans_traceback
    def with_context(self, value: Any, name: str) -> Self:
        """Return validators that add ``name: value`` to every failure message."""
        return self.with_configuration(self._configuration.with_context(value, name))

    @cleans_traceback
    def without_context(self, name: str) -> Self:
        return self.with_configuration(self._configuration.without_context(name))

    def get_context(self) -> Dict[str, Any]:
        return self._configuration.get_context()


# Validates this package's own arguments.
INTERNAL = Validators()

_DEFAULT = Validators()

# Bound methods, so a failure raised through them starts at the caller.
require_that = _DEFAULT.require_that
check_if = _DEFAULT.check_if
assert_that = _DEFAULT.assert_that

__all__ = ["INTERNAL", "Validators", "assert_that", "check_if", "require_that"]
