"""Messages for ordering checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fluent_requirements.message.builder import MessageBuilder, quote_name
from fluent_requirements.message.object_messages import compare_values
from fluent_requirements.string_mappers import StringMappers, UnquotedStringValue

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator


def is_less_than(validator: ObjectValidator, name: str | None, maximum: Any) -> MessageBuilder:
    return compare_values(validator, "must be less than", name, maximum)


def is_less_than_or_equal_to(
    validator: ObjectValidator, name: str | None, maximum: Any
) -> MessageBuilder:
    return compare_values(validator, "must be less than or equal to", name, maximum)


def is_greater_than(validator: ObjectValidator, name: str | None, minimum: Any) -> MessageBuilder:
    return compare_values(validator, "must be greater than", name, minimum)


def is_greater_than_or_equal_to(
    validator: ObjectValidator, name: str | None, minimum: Any
) -> MessageBuilder:
    return compare_values(validator, "must be greater than or equal to", name, minimum)


def is_between(
    validator: ObjectValidator,
    minimum: Any,
    minimum_inclusive: bool,
    maximum: Any,
    maximum_inclusive: bool,
) -> MessageBuilder:
    """Describe a value outside ``minimum``..``maximum``.

    The sentence names the bound that was crossed; the full interval is
    added to the context as ``bounds``.
    """
    string_mappers = validator.configuration.string_mappers
    value = validator.get_value_or_default(None)
    if value < minimum or (value == minimum and not minimum_inclusive):
        limit = f"at least {string_mappers.to_string(minimum)} ({_inclusivity(minimum_inclusive)})"
    else:
        limit = f"at most {string_mappers.to_string(maximum)} ({_inclusivity(maximum_inclusive)})"
    return (
        MessageBuilder(validator, f"{quote_name(validator.name)} must be {limit}.")
        .with_context(value, validator.name)
        .with_context(
            get_bounds(minimum, minimum_inclusive, maximum, maximum_inclusive, string_mappers),
            "bounds",
        )
    )


def get_bounds(
    minimum: Any,
    minimum_inclusive: bool,
    maximum: Any,
    maximum_inclusive: bool,
    string_mappers: StringMappers,
) -> UnquotedStringValue:
    """Render an interval such as ``[4, 6)``."""
    opening = "[" if minimum_inclusive else "("
    closing = "]" if maximum_inclusive else ")"
    return UnquotedStringValue(
        f"{opening}{string_mappers.to_string(minimum)}, {string_mappers.to_string(maximum)}{closing}"
    )


def _inclusivity(inclusive: bool) -> str:
    return "inclusive" if inclusive else "exclusive"
