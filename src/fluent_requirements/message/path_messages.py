"""Messages for filesystem path checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fluent_requirements.message.builder import MessageBuilder, quote_name

if TYPE_CHECKING:
    from fluent_requirements.validator.base import ObjectValidator


def exists(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must exist")


def does_not_exist(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "may not exist")


def is_regular_file(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must refer to a file")


def is_directory(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must refer to a directory")


def is_relative(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be a relative path")


def is_absolute(validator: ObjectValidator) -> MessageBuilder:
    return _describe(validator, "must be an absolute path")


def _describe(validator: ObjectValidator, requirement: str) -> MessageBuilder:
    path = validator.get_value_or_default(None)
    return MessageBuilder(
        validator, f"{quote_name(validator.name)} {requirement}."
    ).with_context(path, validator.name)
