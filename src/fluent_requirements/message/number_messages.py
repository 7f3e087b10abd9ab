"""Messages for numeric checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, quote_name
from fluent_requirements.message.object_messages import compare_values

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator


def is_zero(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be zero")


def is_not_zero(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not be zero")


def is_positive(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be positive")


def is_not_positive(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not be positive")


def is_negative(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be negative")


def is_not_negative(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not be negative")


def is_multiple_of(validator: ObjectValidator, name: str | None, factor: Any) -> MessageBuilder:
    return compare_values(validator, "must be a multiple of", name, factor)


def is_not_multiple_of(validator: ObjectValidator, name: str | None, factor: Any) -> MessageBuilder:
    return compare_values(validator, "may not be a multiple of", name, factor)


def is_whole_number(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be a whole number")


def is_not_whole_number(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not be a whole number")


def is_number(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be a well-defined number")


def is_not_number(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not be a well-defined number")


def is_finite(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be a finite number")


def is_infinite(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be an infinite number")


def _describe(validator: ObjectValidator, requirement: str) -> MessageBuilder:
    return MessageBuilder(
        validator, f"{quote_name(validator.name)} {requirement}."
    ).with_context(validator.get_value_or_default(None), validator.name)
