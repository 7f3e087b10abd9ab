"""Messages shared by every kind of value."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Tuple, Union

from fluent_requirements.message.builder import MessageBuilder, quote_name
from fluent_requirements.message.diff import unique_label
from fluent_requirements.string_mappers import StringMappers

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator

# Renderings shorter than this are compared inline instead of being diffed
MINIMUM_LENGTH_FOR_DIFF = 10


def is_none(validator: ObjectValidator) -> MessageBuilder:
    return _with_value(validator, f"{quote_name(validator.name)} must be None.")


def is_not_none(validator: ObjectValidator) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(validator.name)} may not be None.")


def is_empty(validator: ObjectValidator) -> MessageBuilder:
    return _with_value(validator, f"{quote_name(validator.name)} must be empty.")


def is_not_empty(validator: ObjectValidator) -> MessageBuilder:
    return MessageBuilder(validator, f"{quote_name(validator.name)} may not be empty.")


def is_true(validator: ObjectValidator) -> MessageBuilder:
    return _with_value(validator, f"{quote_name(validator.name)} must be True.")


def is_false(validator: ObjectValidator) -> MessageBuilder:
    return _with_value(validator, f"{quote_name(validator.name)} must be False.")


def is_equal_to(validator: ObjectValidator, expected_name: str | None, expected: Any) -> MessageBuilder:
    """Describe a failed equality check, with a diff when the values are long."""
    actual = validator.get_value_or_default(None)
    string_mappers = validator.configuration.string_mappers
    if (
        not validator.configuration.allow_diff
        or validator.validation_failed()
        or unnecessary_diff(actual, string_mappers)
        or unnecessary_diff(expected, string_mappers)
    ):
        return compare_values(validator, "must be equal to", expected_name, expected)
    return MessageBuilder(
        validator, f"{quote_name(validator.name)} had an unexpected value."
    ).add_diff(
        validator.name,
        actual,
        expected_name or unique_label("expected", (validator.name,)),
        expected,
    )


def is_not_equal_to(
    validator: ObjectValidator, unwanted_name: str | None, unwanted: Any
) -> MessageBuilder:
    return compare_values(validator, "may not be equal to", unwanted_name, unwanted)


def is_same_reference_as(
    validator: ObjectValidator, expected_name: str | None, expected: Any
) -> MessageBuilder:
    return compare_values(validator, "must be the same reference as", expected_name, expected)


def is_not_same_reference_as(
    validator: ObjectValidator, unwanted_name: str | None, unwanted: Any
) -> MessageBuilder:
    return compare_values(validator, "may not be the same reference as", unwanted_name, unwanted)


def is_instance_of(
    validator: ObjectValidator, expected: Union[type, Tuple[type, ...]]
) -> MessageBuilder:
    message = MessageBuilder(
        validator,
        f"{quote_name(validator.name)} must be an instance of {_type_names(validator, expected)}.",
    )
    value = validator.get_value_or_default(None)
    return message.with_context(value, validator.name).with_context(
        type(value), f"type({validator.name})"
    )


def is_not_instance_of(
    validator: ObjectValidator, unwanted: Union[type, Tuple[type, ...]]
) -> MessageBuilder:
    message = MessageBuilder(
        validator,
        f"{quote_name(validator.name)} may not be an instance of {_type_names(validator, unwanted)}.",
    )
    value = validator.get_value_or_default(None)
    return message.with_context(value, validator.name).with_context(
        type(value), f"type({validator.name})"
    )


def compare_values(
    validator: ObjectValidator, relationship: str, other_name: str | None, other: Any
) -> MessageBuilder:
    """Describe a failed relationship between the value and another operand.

    A named operand is referenced by name and its value moves to the
    context; an unnamed operand is rendered inline.
    """
    string_mappers = validator.configuration.string_mappers
    if other_name is not None:
        other_text = quote_name(other_name)
    else:
        other_text = string_mappers.to_string(other)
    message = MessageBuilder(
        validator, f"{quote_name(validator.name)} {relationship} {other_text}."
    )
    message.with_context(validator.get_value_or_default(None), validator.name)
    if other_name is not None:
        message.with_context(other, other_name)
    return message


def unnecessary_diff(value: Any, string_mappers: StringMappers) -> bool:
    """True if ``value`` renders short enough to compare inline."""
    text = string_mappers.to_string(value)
    return len(text) < MINIMUM_LENGTH_FOR_DIFF and "\n" not in text


def _with_value(validator: ObjectValidator, sentence: str) -> MessageBuilder:
    return MessageBuilder(validator, sentence).with_context(
        validator.get_value_or_default(None), validator.name
    )


def _type_names(validator: ObjectValidator, types: Union[type, Tuple[type, ...]]) -> str:
    string_mappers = validator.configuration.string_mappers
    if isinstance(types, tuple):
        return " or ".join(string_mappers.to_string(cls) for cls in types)
    return string_mappers.to_string(types)
