"""Immutable validation policy shared along a validation chain.

A :class:`Configuration` decides how failures turn into exceptions, how
values are compared and rendered, and whether failures are raised as soon
as they are recorded. Every mutator returns a new instance, or the same
instance when nothing would change, so a configuration can be shared
freely between threads and chains.

Example:
    ```python
    from fluent_requirements import Configuration, Validators

    config = (
        Configuration()
        .with_throw_on_failure(False)
        .with_context("orders", "table")
    )
    validators = Validators(config)
    ```
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Any, Callable, ClassVar, Dict, Hashable, Tuple

from fluent_requirements.exceptions import ConfigurationError
from fluent_requirements.string_mappers import StringMapper, StringMappers

ExceptionTransformer = Callable[[BaseException], "BaseException | None"]


def _identity(exception: BaseException) -> BaseException:
    return exception


def _structural_key(value: Any) -> Hashable:
    hash(value)
    return value


@dataclass(frozen=True)
class EqualityMethod:
    """How values are compared for equality and set membership.

    Attributes:
        name: Label used in ``repr`` and settings files
        comparator: Returns True when two values are equal
        key: Maps a value to a hashable key consistent with ``comparator``,
            or None when only pairwise comparison is possible. May raise
            ``TypeError`` for values that cannot be keyed.
    """

    STRUCTURAL: ClassVar["EqualityMethod"]
    IDENTITY: ClassVar["EqualityMethod"]

    name: str
    comparator: Callable[[Any, Any], bool]
    key: Callable[[Any], Hashable] | None = None

    @classmethod
    def custom(
        cls,
        comparator: Callable[[Any, Any], bool],
        key: Callable[[Any], Hashable] | None = None,
        name: str = "custom",
    ) -> EqualityMethod:
        """Create an equality method from a comparator and an optional key function.

        Raises:
            ConfigurationError: If ``comparator`` is None
        """
        if comparator is None:
            raise ConfigurationError("comparator may not be None.")
        return cls(name, comparator, key)

    def equals(self, first: Any, second: Any) -> bool:
        return bool(self.comparator(first, second))

    def __repr__(self) -> str:
        return f"EqualityMethod.{self.name.upper()}"


EqualityMethod.STRUCTURAL = EqualityMethod("structural", operator.eq, _structural_key)
EqualityMethod.IDENTITY = EqualityMethod("identity", operator.is_, id)


@dataclass(frozen=True)
class Configuration:
    """Policy that governs a validation chain.

    Attributes:
        exception_transformer: Receives the default exception for a failure
            and returns the exception to surface (None keeps the input).
            Applied once, when failures are resolved.
        equality_method: Comparison used by equality and containment checks
        string_mappers: Rendering registry used by every message
        clean_stack_trace: Remove this package's frames from produced exceptions
        allow_diff: Permit character diffs in equality messages
        throw_on_failure: Raise on the first failure (fail-fast) instead of
            collecting failures until a terminal call
        context: Ordered ``(name, value)`` pairs appended to every message
    """

    exception_transformer: ExceptionTransformer = _identity
    equality_method: EqualityMethod = EqualityMethod.STRUCTURAL
    string_mappers: StringMappers = StringMappers.DEFAULT
    clean_stack_trace: bool = True
    allow_diff: bool = True
    throw_on_failure: bool = True
    context: Tuple[Tuple[str, Any], ...] = ()

    def with_exception_transformer(self, transformer: ExceptionTransformer) -> Configuration:
        """Return a configuration that maps exceptions using ``transformer``."""
        _require_not_none(transformer, "transformer")
        if transformer is self.exception_transformer:
            return self
        return replace(self, exception_transformer=transformer)

    def with_equality_method(self, equality_method: EqualityMethod) -> Configuration:
        _require_not_none(equality_method, "equality_method")
        if equality_method == self.equality_method:
            return self
        return replace(self, equality_method=equality_method)

    def with_string_mappers(self, string_mappers: StringMappers) -> Configuration:
        _require_not_none(string_mappers, "string_mappers")
        if string_mappers == self.string_mappers:
            return self
        return replace(self, string_mappers=string_mappers)

    def with_string_mapper(self, type_: type, mapper: StringMapper) -> Configuration:
        """Return a configuration that renders ``type_`` using ``mapper``."""
        _require_not_none(type_, "type")
        _require_not_none(mapper, "mapper")
        return self.with_string_mappers(self.string_mappers.with_mapper(type_, mapper))

    def with_clean_stack_trace(self, clean_stack_trace: bool = True) -> Configuration:
        _require_not_none(clean_stack_trace, "clean_stack_trace")
        if clean_stack_trace == self.clean_stack_trace:
            return self
        return replace(self, clean_stack_trace=clean_stack_trace)

    def with_allow_diff(self, allow_diff: bool = True) -> Configuration:
        _require_not_none(allow_diff, "allow_diff")
        if allow_diff == self.allow_diff:
            return self
        return replace(self, allow_diff=allow_diff)

    def with_throw_on_failure(self, throw_on_failure: bool = True) -> Configuration:
        _require_not_none(throw_on_failure, "throw_on_failure")
        if throw_on_failure == self.throw_on_failure:
            return self
        return replace(self, throw_on_failure=throw_on_failure)

    def with_context(self, value: Any, name: str) -> Configuration:
        """Return a configuration whose context maps ``name`` to ``value``.

        An existing entry with the same name is replaced in place.

        Raises:
            ConfigurationError: If ``name`` is None, empty or contains whitespace
        """
        _require_valid_name(name)
        context = self.get_context()
        if name in context and context[name] is value:
            return self
        context[name] = value
        return replace(self, context=tuple(context.items()))

    def without_context(self, name: str) -> Configuration:
        """Return a configuration without the context entry for ``name``."""
        _require_not_none(name, "name")
        context = self.get_context()
        if name not in context:
            return self
        del context[name]
        return replace(self, context=tuple(context.items()))

    def get_context(self) -> Dict[str, Any]:
        """Return a copy of the context, in insertion order."""
        return dict(self.context)


def _require_not_none(value: Any, name: str) -> None:
    if value is None:
        raise ConfigurationError(f"{name} may not be None.", context={"name": name})


def _require_valid_name(name: str) -> None:
    _require_not_none(name, "name")
    if not isinstance(name, str):
        raise ConfigurationError("name must be a str.", context={"name": name})
    if not name.strip():
        raise ConfigurationError("name may not be empty.", context={"name": name})
    if any(character.isspace() for character in name):
        raise ConfigurationError("name may not contain whitespace.", context={"name": name})


__all__ = ["Configuration", "EqualityMethod", "ExceptionTransformer"]
