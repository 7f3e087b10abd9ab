"""The validator state machine shared by every capability.

An :class:`ObjectValidator` wraps one named value. It is either *active*,
meaning the value is known and checks are evaluated, or *short-circuited*,
meaning a root-cause failure (a ``None`` value or a failed type check) has
been recorded and every later check is a no-op. The transition only goes
one way.

Failures are appended to a list shared by every validator derived from the
same entry point (nested size/keys validators, operand validators and
narrowed validators), so a chain reports all of its failures together.

When the configuration says ``throw_on_failure``, the first failure is
raised immediately; otherwise failures accumulate until a terminal call
such as :meth:`ObjectValidator.else_throw`.

Public methods of every validator class are wrapped by
:func:`~fluent_requirements.tracebacks.cleans_traceback`, so exceptions
they raise start at the caller when ``clean_stack_trace`` is set.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import UnionType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from typing_extensions import Self

from fluent_requirements.configuration import Configuration
from fluent_requirements.exceptions import (
    InvalidArgumentError,
    NullValueError,
    ValueUnavailableError,
)
from fluent_requirements.failures import FailureAggregate, FailureKind, ValidationFailure
from fluent_requirements.message import object_messages
from fluent_requirements.message.builder import (
    MessageBuilder,
    quote_name,
    render_context_section,
    render_sections,
)
from fluent_requirements.message.pluralizer import Pluralizer
from fluent_requirements.tracebacks import clean_public_methods

if TYPE_CHECKING:
    from fluent_requirements.validator.size import SizeValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V", bound="ObjectValidator")

ClassInfo = Union[type, Tuple[type, ...]]


class _State(Enum):
    ACTIVE = "active"
    SHORT_CIRCUITED = "short-circuited"


class _Undefined:
    """Marks the value of a validator that starts short-circuited."""

    def __repr__(self) -> str:
        return "<undefined>"


UNDEFINED: Any = _Undefined()


def check_name(name: Any, label: str = "name") -> None:
    """Reject names that are None, not strings, empty or contain whitespace.

    Raises:
        NullValueError: If ``name`` is None
        InvalidArgumentError: If ``name`` is not a valid name
    """
    if name is None:
        raise NullValueError(f'"{label}" may not be None.')
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f'"{label}" must be an instance of str.', context={label: name}
        )
    if not name:
        raise InvalidArgumentError(f'"{label}" may not be empty.')
    if any(character.isspace() for character in name):
        raise InvalidArgumentError(
            f'"{label}" may not contain whitespace.', context={label: name}
        )


def internal_validator(name: str, value: Any) -> ObjectValidator:
    """Return a fail-fast validator for checking this package's own arguments."""
    from fluent_requirements.validators import INTERNAL

    return INTERNAL.require_that(name, value)


class ObjectValidator(Generic[T]):
    """Validates a named value of any type.

    Args:
        name: Name of the value, used in messages. May not be empty or
            contain whitespace.
        value: The value to validate
        configuration: Policy for the chain (defaults to ``Configuration()``)
        failures: Failure list shared with related validators
        context: Context entries inherited from a parent validator

    Raises:
        InvalidArgumentError: If ``name`` is invalid, or no ``context`` is given
            and ``name`` is already a key of the configuration's context

    Example:
        ```python
        from fluent_requirements import check_if

        failures = (
            check_if("user", user)
            .is_not_none()
            .is_instance_of(User)
            .else_get_failures()
        )
        ```
    """

    def __init__(
        self,
        name: str,
        value: Any,
        configuration: Configuration | None = None,
        failures: List[ValidationFailure] | None = None,
        context: Dict[str, Any] | None = None,
    ) -> None:
        check_name(name)
        self._name = name
        self._value = value
        self._configuration = configuration if configuration is not None else Configuration()
        self._failures: List[ValidationFailure] = failures if failures is not None else []
        if context is None:
            context = self._configuration.get_context()
            if name in context:
                raise InvalidArgumentError(
                    f'The name "{name}" is already used by the context.',
                    context={"name": name, "context": list(context)},
                )
        self._context: Dict[str, Any] = dict(context)
        self._state = _State.SHORT_CIRCUITED if value is UNDEFINED else _State.ACTIVE

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        clean_public_methods(cls)

    @property
    def name(self) -> str:
        return self._name

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, state={self._state.value})"

    # State

    def is_active(self) -> bool:
        """True until a root-cause failure short-circuits this validator."""
        return self._state is _State.ACTIVE

    def validation_failed(self) -> bool:
        """True if any failure has been recorded on this chain."""
        return bool(self._failures)

    def get_value(self) -> T:
        """Return the validated value.

        Raises:
            ValueUnavailableError: If the validator is short-circuited
        """
        if not self.is_active():
            raise ValueUnavailableError(
                f"The value of {quote_name(self._name)} is unavailable because an "
                "earlier check failed.",
                context={"name": self._name},
            )
        return self._value

    def get_value_or_default(self, default: Any) -> Any:
        if not self.is_active():
            return default
        return self._value

    # Context

    def with_context(self, value: Any, name: str) -> Self:
        """Add ``name: value`` to the context of every later failure of this validator.

        An existing entry with the same name is replaced.

        Raises:
            NullValueError: If ``name`` is None
            InvalidArgumentError: If ``name`` is invalid or equals the value's name
        """
        self._require_that_name_is_not_value_name(name)
        self._context[name] = value
        return self

    def get_context(self) -> Dict[str, Any]:
        return dict(self._context)

    def get_context_as_string(self) -> str:
        """Render the context as aligned ``name: value`` lines."""
        if not self._context:
            return ""
        return render_sections(
            [render_context_section(self._context, self._configuration.string_mappers)]
        )

    def and_(self, *checks: Callable[[Self], Any]) -> Self:
        """Apply each of ``checks`` to this validator, in order.

        Example:
            ```python
            check_if("port", port).and_(
                lambda v: v.is_greater_than(0),
                lambda v: v.is_less_than(65536),
            )
            ```
        """
        for check in checks:
            check(self)
        return self

    # Terminal operations

    def else_throw(self) -> bool:
        """Raise the exception for the recorded failures, if any.

        Returns:
            True when no failures were recorded
        """
        FailureAggregate(self._failures, self._configuration).raise_if_failed()
        return True

    def else_get_failures(self) -> List[ValidationFailure]:
        return list(self._failures)

    def else_get_exception(self) -> BaseException | None:
        return FailureAggregate(self._failures, self._configuration).get_exception()

    def else_get_messages(self) -> List[str]:
        return [failure.message for failure in self._failures]

    # Checks

    def is_none(self) -> Self:
        return self._require(
            lambda value: value is None,
            lambda: object_messages.is_none(self),
            requires_value=False,
        )

    def is_not_none(self) -> Self:
        return self._require(lambda value: True, lambda: object_messages.is_not_none(self))

    def is_equal_to(self, expected: Any, name: str | None = None) -> Self:
        """Require the value to equal ``expected`` under the configured equality method.

        Args:
            expected: The expected value
            name: Name of ``expected``, if it is a named value
        """
        if not self.is_active():
            return self
        if name is not None:
            self._require_that_name_is_unique(name)
        equality = self._configuration.equality_method
        return self._require(
            lambda value: equality.equals(value, expected),
            lambda: object_messages.is_equal_to(self, name, expected),
            requires_value=False,
        )

    def is_not_equal_to(self, unwanted: Any, name: str | None = None) -> Self:
        if not self.is_active():
            return self
        if name is not None:
            self._require_that_name_is_unique(name)
        equality = self._configuration.equality_method
        return self._require(
            lambda value: not equality.equals(value, unwanted),
            lambda: object_messages.is_not_equal_to(self, name, unwanted),
            requires_value=False,
        )

    def is_same_reference_as(self, expected: Any, name: str | None = None) -> Self:
        if not self.is_active():
            return self
        if name is not None:
            self._require_that_name_is_unique(name)
        return self._require(
            lambda value: value is expected,
            lambda: object_messages.is_same_reference_as(self, name, expected),
            requires_value=False,
        )

    def is_not_same_reference_as(self, unwanted: Any, name: str | None = None) -> Self:
        if not self.is_active():
            return self
        if name is not None:
            self._require_that_name_is_unique(name)
        return self._require(
            lambda value: value is not unwanted,
            lambda: object_messages.is_not_same_reference_as(self, name, unwanted),
            requires_value=False,
        )

    def is_instance_of(self, expected: ClassInfo) -> ObjectValidator:
        """Require the value to be an instance of ``expected`` and narrow the validator.

        Returns:
            A validator with the capabilities of ``expected`` (for example a
            NumberValidator for ``int``). If the check fails, this validator
            and the returned one are short-circuited.
        """
        if isinstance(expected, UnionType):
            expected = expected.__args__
        _check_classinfo(expected, "expected")
        from fluent_requirements.validator.dispatch import validator_class_for_type

        target = validator_class_for_type(expected)
        self._require(
            lambda value: isinstance(value, expected),
            lambda: object_messages.is_instance_of(self, expected),
            requires_value=False,
        )
        if self.is_active() and not isinstance(self._value, expected):
            # A failed type check is a root cause for the whole chain
            self._short_circuit()
        return self._derive(target, self._name, self._value)

    def is_not_instance_of(self, unwanted: ClassInfo) -> Self:
        if isinstance(unwanted, UnionType):
            unwanted = unwanted.__args__
        _check_classinfo(unwanted, "unwanted")
        return self._require(
            lambda value: not isinstance(value, unwanted),
            lambda: object_messages.is_not_instance_of(self, unwanted),
            requires_value=False,
        )

    # Engine

    def _require(
        self,
        passes: Callable[[Any], bool],
        message: Callable[[], MessageBuilder],
        kind: FailureKind = FailureKind.ILLEGAL_ARGUMENT,
        requires_value: bool = True,
    ) -> Self:
        """Evaluate one constraint.

        Args:
            passes: Predicate applied to the value
            message: Builds the failure message when the predicate fails
            kind: Kind of failure to record
            requires_value: Treat a None value as a root-cause failure

        Returns:
            This validator
        """
        if not self.is_active():
            return self
        if requires_value and self._value is None:
            self._fail_null()
            return self
        if not passes(self._value):
            self._add_failure(message().build(kind))
        return self

    def _fail_null(self) -> None:
        failure = object_messages.is_not_none(self).build(FailureKind.NULL_VALUE)
        self._short_circuit()
        self._add_failure(failure)

    def _short_circuit(self) -> None:
        self._state = _State.SHORT_CIRCUITED
        logger.debug("Validator for %s short-circuited", self._name)

    def _add_failure(self, failure: ValidationFailure) -> None:
        self._failures.append(failure)
        logger.debug("Recorded %s failure for %s", failure.kind.value, self._name)
        if self._configuration.throw_on_failure:
            FailureAggregate([failure], self._configuration).raise_if_failed()

    def _check_operand(self, value: Any, name: str | None, default_name: str) -> bool:
        """Validate a comparison operand.

        A named operand must have a unique name. A None operand is recorded
        as a failure of the operand itself, under its own name.

        Returns:
            True if the operand can be used
        """
        if name is not None:
            self._require_that_name_is_unique(name)
        if value is not None:
            return True
        self._nested(ObjectValidator, name or default_name, value).is_not_none()
        return False

    def _require_that_name_is_unique(self, name: str) -> None:
        """Operand names may not clash with the value's name or a context key."""
        self._require_that_name_is_not_value_name(name)
        if name in self._context:
            raise InvalidArgumentError(
                f'The name "{name}" is already used by the context.',
                context={"name": name, "context": list(self._context)},
            )

    def _require_that_name_is_not_value_name(self, name: str) -> None:
        check_name(name)
        if name == self._name:
            raise InvalidArgumentError(
                f'The name "{name}" is already used by the value being validated.',
                context={"name": name},
            )

    def _nested(self, cls: Type[V], name: str, value: Any) -> V:
        """Create a validator that shares this chain's failures, configuration and context."""
        return cls(name, value, self._configuration, self._failures, self._context)

    def _size(self, pluralizer: Pluralizer) -> SizeValidator:
        """Create a validator for ``len(value)`` that reports failures against this value."""
        from fluent_requirements.validator.size import SizeValidator

        if self.is_active() and self._value is None:
            self._fail_null()
        size = len(self._value) if self.is_active() else UNDEFINED
        return SizeValidator(
            f"len({self._name})",
            size,
            self._configuration,
            self._failures,
            self._context,
            parent=self,
            pluralizer=pluralizer,
        )

    def _derive(self, cls: Type[V], name: str, value: Any, **kwargs: Any) -> V:
        """Like _nested, but the result starts short-circuited if this validator is."""
        if not self.is_active():
            value = UNDEFINED
        return cls(name, value, self._configuration, self._failures, self._context, **kwargs)


def _check_classinfo(classinfo: Any, label: str) -> None:
    if isinstance(classinfo, type):
        return
    if (
        isinstance(classinfo, tuple)
        and classinfo
        and all(isinstance(cls, type) for cls in classinfo)
    ):
        return
    internal_validator(label, classinfo).is_instance_of(type)


clean_public_methods(ObjectValidator)

__all__ = ["ObjectValidator", "UNDEFINED", "check_name", "internal_validator"]
