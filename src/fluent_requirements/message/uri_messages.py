"""Messages for URI checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_requirements.message.builder import MessageBuilder, quote_name

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator


def is_absolute(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be an absolute URI")


def is_relative(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be a relative URI")


def _describe(validator: ObjectValidator, requirement: str) -> MessageBuilder:
    uri = validator.get_value_or_default(None)
    text = uri.geturl() if uri is not None else None
    return MessageBuilder(
        validator, f"{quote_name(validator.name)} {requirement}."
    ).with_context(text, validator.name)
