"""Exception hierarchy for fluent_requirements.

Every exception raised by this package extends :class:`RequirementsError`,
which carries an optional ``context`` dictionary with the values that led to
the error.

The hierarchy distinguishes two families:

- **Engine preconditions** (:class:`ConfigurationError`, and name checks that
  raise :class:`NullValueError` / :class:`InvalidArgumentError` directly):
  misuse of the library itself. Raised immediately.
- **Validation failures** (:class:`ValidationError` subclasses): a value
  broke a declared constraint. Built from a recorded
  :class:`~fluent_requirements.failures.ValidationFailure` when the failures
  of a chain are resolved.

The concrete failure classes also extend the matching builtin exception, so
callers that only know about ``TypeError`` / ``ValueError`` keep working.

Example:
    ```python
    from fluent_requirements import require_that
    from fluent_requirements.exceptions import InvalidArgumentError

    try:
        require_that("port", 70000).is_between(1, 65536)
    except InvalidArgumentError as e:
        print(e)
        print(e.context)  # {'port': 70000, 'bounds': ...}
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Sequence

if TYPE_CHECKING:
    from fluent_requirements.failures import ValidationFailure


class RequirementsError(Exception):
    """Base exception for all fluent_requirements errors.

    Attributes:
        message: Human-readable error message
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence when both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.context = details or context or {}
        self.details = self.context


class ConfigurationError(RequirementsError, ValueError):
    """Raised when the library itself is misconfigured.

    Covers ``None`` passed to a configuration mutator, unknown settings keys
    and malformed settings files. Never deferred.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown setting: colour",
            context={"key": "colour", "allowed": ["allow_diff", "clean_stack_trace"]},
        )
        ```
    """

    pass


class ValidationError(RequirementsError):
    """Base class of the exceptions produced for failed constraints.

    Attributes:
        failure: The recorded failure this exception was built from, or None
            when raised directly for an engine precondition
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        failure: ValidationFailure | None = None,
    ):
        super().__init__(message, context=context)
        self.failure = failure


class NullValueError(ValidationError, TypeError):
    """Raised when a value is ``None`` but a constraint requires a value."""

    pass


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when a value breaks a constraint on its contents."""

    pass


class InvalidStateError(ValidationError, RuntimeError):
    """Raised when an object's state breaks a declared invariant."""

    pass


class MultipleFailuresError(ValidationError):
    """Raised when a chain resolves with two or more failures.

    Attributes:
        failures: The recorded failures, in the order they were recorded
        exceptions: One exception per failure, in the same order

    Example:
        ```python
        from fluent_requirements import check_if

        try:
            check_if("x", -1).is_positive().is_greater_than(10).else_throw()
        except MultipleFailuresError as e:
            for message in e.messages:
                print(message)
        ```
    """

    def __init__(
        self,
        failures: Sequence[ValidationFailure],
        exceptions: Sequence[BaseException] | None = None,
    ):
        self.failures: List[ValidationFailure] = list(failures)
        if exceptions is None:
            exceptions = [failure.create_exception() for failure in self.failures]
        self.exceptions: List[BaseException] = list(exceptions)
        header = f"{len(self.failures)} validation failures occurred:"
        body = "\n\n".join(
            f"{index}. {_indent(failure.message)}"
            for index, failure in enumerate(self.failures, start=1)
        )
        super().__init__(f"{header}\n\n{body}", context={"failures": len(self.failures)})

    @property
    def messages(self) -> List[str]:
        """Return the message of every failure, in order."""
        return [failure.message for failure in self.failures]


class ValueUnavailableError(RequirementsError, LookupError):
    """Raised when the value of a short-circuited validator is requested.

    A validator stops tracking its value once a root-cause failure (such as
    a ``None`` value or a failed type check) has been recorded.
    """

    pass


def _indent(text: str) -> str:
    return text.replace("\n", "\n   ")


__all__ = [
    "RequirementsError",
    "ConfigurationError",
    "ValidationError",
    "NullValueError",
    "InvalidArgumentError",
    "InvalidStateError",
    "MultipleFailuresError",
    "ValueUnavailableError",
]
