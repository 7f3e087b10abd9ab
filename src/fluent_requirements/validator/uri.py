"""Checks for parsed URIs (``urllib.parse`` results)."""

from __future__ import annotations

from typing_extensions import Self

from fluent_requirements.message import uri_messages
from fluent_requirements.validator.base import ObjectValidator


class UriValidator(ObjectValidator):
    """Validates ``SplitResult`` / ``ParseResult`` values.

    Obtained from ``StringValidator.as_uri()`` or by validating an already
    parsed URI.
    """

    def is_absolute(self) -> Self:
        """Require the URI to have a scheme."""
        return self._require(lambda uri: bool(uri.scheme), lambda: uri_messages.is_absolute(self))

    def is_relative(self) -> Self:
        return self._require(lambda uri: not uri.scheme, lambda: uri_messages.is_relative(self))
