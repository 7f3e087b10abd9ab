"""Failure records and their resolution into exceptions.

Validators record a :class:`ValidationFailure` for every broken constraint.
A :class:`FailureAggregate` turns the failures of one validation episode
into nothing, a single exception, or a
:class:`~fluent_requirements.exceptions.MultipleFailuresError`.

Example:
    ```python
    from fluent_requirements import check_if

    failures = check_if("x", None).is_greater_than(5).else_get_failures()
    len(failures)          # 1
    failures[0].kind       # FailureKind.NULL_VALUE
    ```
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Type

from fluent_requirements.configuration import Configuration
from fluent_requirements.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    InvalidStateError,
    MultipleFailuresError,
    NullValueError,
    ValidationError,
)
from fluent_requirements.tracebacks import clean_traceback, cleans_traceback

logger = logging.getLogger(__name__)


class FailureKind(Enum):
    """Category of a recorded failure."""

    NULL_VALUE = "null_value"
    ILLEGAL_ARGUMENT = "illegal_argument"
    INVALID_STATE = "invalid_state"

    @property
    def exception_class(self) -> Type[ValidationError]:
        """Default exception class for this kind of failure."""
        return _EXCEPTION_CLASSES[self]


_EXCEPTION_CLASSES: Dict[FailureKind, Type[ValidationError]] = {
    FailureKind.NULL_VALUE: NullValueError,
    FailureKind.ILLEGAL_ARGUMENT: InvalidArgumentError,
    FailureKind.INVALID_STATE: InvalidStateError,
}


@dataclass(frozen=True)
class ValidationFailure:
    """A single broken constraint.

    Attributes:
        kind: Category of the failure
        message: Rendered message, including context lines
        context: Ordered ``(name, value)`` pairs behind the message
    """

    kind: FailureKind
    message: str
    context: Tuple[Tuple[str, Any], ...] = ()

    def get_context(self) -> Dict[str, Any]:
        return dict(self.context)

    def create_exception(self) -> ValidationError:
        """Create the default exception for this failure."""
        return self.kind.exception_class(self.message, context=self.get_context(), failure=self)


class FailureAggregate:
    """The failures recorded during one validation episode.

    Args:
        failures: Recorded failures, in order
        configuration: Configuration that maps failures to exceptions
    """

    def __init__(
        self, failures: Sequence[ValidationFailure], configuration: Configuration
    ) -> None:
        self._failures: Tuple[ValidationFailure, ...] = tuple(failures)
        self._configuration = configuration

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def failures(self) -> List[ValidationFailure]:
        return list(self._failures)

    @property
    def messages(self) -> List[str]:
        return [failure.message for failure in self._failures]

    @property
    def is_empty(self) -> bool:
        return not self._failures

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self._failures)

    def get_exception(self) -> BaseException | None:
        """Return the exception that represents the failures.

        Returns:
            None when there are no failures, the mapped exception of the
            failure when there is exactly one, and a mapped
            MultipleFailuresError otherwise.

        Raises:
            ConfigurationError: If the exception transformer returns
                something other than an exception
        """
        if not self._failures:
            return None
        if len(self._failures) == 1:
            result = self._transform(self._failures[0].create_exception())
        else:
            exceptions = [self._transform(f.create_exception()) for f in self._failures]
            result = self._transform(MultipleFailuresError(self._failures, exceptions))
        logger.debug(
            "Resolved %d failure(s) into %s", len(self._failures), type(result).__name__
        )
        # A transformer may return an exception that was raised earlier
        if self._configuration.clean_stack_trace:
            clean_traceback(result)
        return result

    @cleans_traceback
    def raise_if_failed(self) -> None:
        """Raise the exception for the failures, if there are any."""
        exception = self.get_exception()
        if exception is not None:
            raise exception

    def _transform(self, exception: BaseException) -> BaseException:
        transformed = self._configuration.exception_transformer(exception)
        if transformed is None:
            return exception
        if not isinstance(transformed, BaseException):
            raise ConfigurationError(
                "exception_transformer must return an exception or None.",
                context={"returned": transformed, "input": exception},
            )
        return transformed


__all__ = ["FailureAggregate", "FailureKind", "ValidationFailure"]
