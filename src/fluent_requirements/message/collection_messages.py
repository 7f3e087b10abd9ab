"""Messages for collection, mapping and size checks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from fluent_requirements.message import comparable_messages
from fluent_requirements.message.builder import MessageBuilder, quote_name
from fluent_requirements.message.object_messages import compare_values

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator
    from fluent_requirements.validator.size import SizeValidator


def contains(validator: ObjectValidator, name: str | None, element: Any) -> MessageBuilder:
    return compare_values(validator, "must contain", name, element)


def does_not_contain(validator: ObjectValidator, name: str | None, element: Any) -> MessageBuilder:
    return compare_values(validator, "may not contain", name, element)


def contains_any(validator: ObjectValidator, name: str | None, expected: Any) -> MessageBuilder:
    return compare_values(validator, "must contain any of", name, expected)


def does_not_contain_any(
    validator: ObjectValidator, name: str | None, unwanted: Any, present: Sequence[Any]
) -> MessageBuilder:
    return compare_values(validator, "may not contain any of", name, unwanted).with_context(
        list(present), "unwanted"
    )


def contains_all(
    validator: ObjectValidator, name: str | None, expected: Any, missing: Sequence[Any]
) -> MessageBuilder:
    return compare_values(validator, "must contain all of", name, expected).with_context(
        list(missing), "missing"
    )


def does_not_contain_all(validator: ObjectValidator, name: str | None, unwanted: Any) -> MessageBuilder:
    return compare_values(validator, "may not contain all of", name, unwanted)


def contains_exactly(
    validator: ObjectValidator,
    name: str | None,
    expected: Any,
    missing: Sequence[Any],
    unwanted: Sequence[Any],
) -> MessageBuilder:
    message = compare_values(validator, "must consist of", name, expected)
    if missing:
        message.with_context(list(missing), "missing")
    if unwanted:
        message.with_context(list(unwanted), "unwanted")
    return message


def does_not_contain_exactly(
    validator: ObjectValidator, name: str | None, unwanted: Any
) -> MessageBuilder:
    return compare_values(validator, "may not consist of", name, unwanted)


def does_not_contain_duplicates(
    validator: ObjectValidator, duplicates: Sequence[Any]
) -> MessageBuilder:
    noun = validator.pluralizer.plural  # type: ignore[attr-defined]
    return (
        MessageBuilder(validator, f"{quote_name(validator.name)} may not contain duplicate {noun}.")
        .with_context(validator.get_value_or_default(None), validator.name)
        .with_context(list(duplicates), "duplicates")
    )


def is_sorted(validator: ObjectValidator, expected: Sequence[Any]) -> MessageBuilder:
    return (
        MessageBuilder(validator, f"{quote_name(validator.name)} must be sorted.")
        .with_context(validator.get_value_or_default(None), validator.name)
        .with_context(list(expected), "expected")
    )


def is_sortable(validator: ObjectValidator, reason: str) -> MessageBuilder:
    """Describe elements that cannot be put in order."""
    return (
        MessageBuilder(
            validator,
            f"{quote_name(validator.name)} must contain elements that can be compared to each other.",
        )
        .with_context(validator.get_value_or_default(None), validator.name)
        .with_context(reason, "reason")
    )


def size_compare(
    validator: SizeValidator, relationship: str, name: str | None, count: Any
) -> MessageBuilder:
    """Describe a size check in terms of the container, e.g. "must contain at least 3 elements".

    Args:
        validator: The validator of the container's size
        relationship: Phrase such as "must contain at least"
        name: Name of the count operand, if any
        count: The count the size was compared against
    """
    parent = validator.parent
    noun = validator.pluralizer.name_of(count, name)
    if name is not None:
        target = f"{quote_name(name)} ({count})"
    else:
        target = str(count)
    message = MessageBuilder(validator, f"{quote_name(parent.name)} {relationship} {target} {noun}.")
    message.with_context(parent.get_value_or_default(None), parent.name)
    message.with_context(validator.get_value_or_default(None), validator.name)
    if name is not None:
        message.with_context(count, name)
    return message


def size_is_between(
    validator: SizeValidator,
    minimum: Any,
    minimum_inclusive: bool,
    maximum: Any,
    maximum_inclusive: bool,
) -> MessageBuilder:
    """Describe a size outside a range using whole counts."""
    if not isinstance(minimum, int) or not isinstance(maximum, int):
        return comparable_messages.is_between(
            validator, minimum, minimum_inclusive, maximum, maximum_inclusive
        )
    lowest = minimum if minimum_inclusive else minimum + 1
    highest = maximum if maximum_inclusive else maximum - 1
    size = validator.get_value_or_default(None)
    if size < lowest:
        message = size_compare(validator, "must contain at least", None, lowest)
    else:
        message = size_compare(validator, "must contain at most", None, highest)
    string_mappers = validator.configuration.string_mappers
    return message.with_context(
        comparable_messages.get_bounds(
            minimum, minimum_inclusive, maximum, maximum_inclusive, string_mappers
        ),
        "bounds",
    )

