"""Messages for string checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, quote_name

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator


def is_blank(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be empty or contain only whitespace")


def is_not_blank(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not be empty or contain only whitespace")


def is_trimmed(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not contain leading or trailing whitespace")


def does_not_contain_whitespace(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not contain whitespace")


def starts_with(validator: ObjectValidator, prefix: str) -> MessageBuilder:
    return _quote(validator, "must start with", prefix)


def does_not_start_with(validator: ObjectValidator, prefix: str) -> MessageBuilder:
    return _quote(validator, "may not start with", prefix)


def ends_with(validator: ObjectValidator, suffix: str) -> MessageBuilder:
    return _quote(validator, "must end with", suffix)


def does_not_end_with(validator: ObjectValidator, suffix: str) -> MessageBuilder:
    return _quote(validator, "may not end with", suffix)


def contains(validator: ObjectValidator, expected: str) -> MessageBuilder:
    return _quote(validator, "must contain", expected)


def does_not_contain(validator: ObjectValidator, unwanted: str) -> MessageBuilder:
    return _quote(validator, "may not contain", unwanted)


def matches(validator: ObjectValidator, pattern: str) -> MessageBuilder:
    return _quote(validator, "must match the regular expression", pattern)


def is_uri(validator: ObjectValidator, error: BaseException) -> MessageBuilder:
    return _describe(validator, "must be a valid URI").with_context(str(error), "reason")


def _describe(validator: ObjectValidator, requirement: str) -> MessageBuilder:
    return MessageBuilder(
        validator, f"{quote_name(validator.name)} {requirement}."
    ).with_context(validator.get_value_or_default(None), validator.name)


def _quote(validator: ObjectValidator, relationship: str, operand: Any) -> MessageBuilder:
    operand_text = validator.configuration.string_mappers.to_string(operand)
    return _describe(validator, f"{relationship} {operand_text}")
