"""Per-type rendering of values inside failure messages.

A :class:`StringMappers` registry maps types to functions that turn a value
into the text shown in a message. Lookups follow the value's MRO, so a
mapper registered for a base class applies to its subclasses too. Types
without a mapper fall back to built-in rendering.

Example:
    ```python
    from fluent_requirements.string_mappers import StringMappers

    class Password(str):
        pass

    mappers = StringMappers.DEFAULT.with_mapper(Password, lambda value: "******")
    mappers.to_string(Password("hunter2"))  # '******'
    mappers.to_string("plain")              # '"plain"'
    ```
"""

from __future__ import annotations

import json
import traceback
from decimal import Decimal
from fractions import Fraction
from pathlib import PurePath
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping, Set

from fluent_requirements.exceptions import ConfigurationError

StringMapper = Callable[[Any], str]


class UnquotedStringValue:
    """Text that renders as-is, without the quotes applied to strings."""

    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __eq__(self, other: object) -> bool:
        return isinstance(other, UnquotedStringValue) and other.text == self.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"UnquotedStringValue({self.text!r})"


class StringMappers:
    """Immutable registry of per-type string mappers.

    Args:
        mappers: Optional initial mapping from type to mapper function
    """

    DEFAULT: ClassVar["StringMappers"]

    def __init__(self, mappers: Mapping[type, StringMapper] | None = None) -> None:
        self._mappers: Mapping[type, StringMapper] = MappingProxyType(dict(mappers or {}))

    @property
    def mappers(self) -> Mapping[type, StringMapper]:
        """Read-only view of the registered mappers."""
        return self._mappers

    def with_mapper(self, type_: type, mapper: StringMapper) -> StringMappers:
        """Return a registry that renders ``type_`` (and subclasses) using ``mapper``.

        Raises:
            ConfigurationError: If ``type_`` or ``mapper`` is None
        """
        if type_ is None:
            raise ConfigurationError("type may not be None.")
        if mapper is None:
            raise ConfigurationError("mapper may not be None.", context={"type": type_})
        if self._mappers.get(type_) is mapper:
            return self
        updated = dict(self._mappers)
        updated[type_] = mapper
        return StringMappers(updated)

    def without_mapper(self, type_: type) -> StringMappers:
        """Return a registry without the mapper registered for ``type_``."""
        if type_ not in self._mappers:
            return self
        updated = dict(self._mappers)
        del updated[type_]
        return StringMappers(updated)

    def to_string(self, value: Any) -> str:
        """Render ``value`` for use in a failure message."""
        return self._render(value, set())

    def _render(self, value: Any, seen: Set[int]) -> str:
        mapper = self._lookup(type(value))
        if mapper is not None:
            return mapper(value)
        return self._fallback(value, seen)

    def _lookup(self, cls: type) -> StringMapper | None:
        if not self._mappers:
            return None
        for base in cls.__mro__:
            mapper = self._mappers.get(base)
            if mapper is not None:
                return mapper
        return None

    def _fallback(self, value: Any, seen: Set[int]) -> str:
        if value is None:
            return "None"
        if isinstance(value, UnquotedStringValue):
            return value.text
        if isinstance(value, str):
            return json.dumps(value, ensure_ascii=False)
        if isinstance(value, bool):
            return repr(value)
        if isinstance(value, (Decimal, Fraction)):
            return str(value)
        if isinstance(value, PurePath):
            return str(value)
        if isinstance(value, type):
            return _type_name(value)
        if isinstance(value, BaseException):
            return "".join(
                traceback.format_exception(type(value), value, value.__traceback__)
            ).rstrip()
        if isinstance(value, (list, tuple, set, frozenset, dict)):
            if id(value) in seen:
                return "[...]" if isinstance(value, list) else "{...}"
            seen.add(id(value))
            try:
                return self._render_container(value, seen)
            finally:
                seen.discard(id(value))
        return repr(value)

    def _render_container(self, value: Any, seen: Set[int]) -> str:
        if isinstance(value, dict):
            entries = ", ".join(
                f"{self._render(k, seen)}: {self._render(v, seen)}" for k, v in value.items()
            )
            return "{" + entries + "}"
        elements = ", ".join(self._render(element, seen) for element in value)
        if isinstance(value, list):
            return f"[{elements}]"
        if isinstance(value, tuple):
            return f"({elements},)" if len(value) == 1 else f"({elements})"
        if isinstance(value, frozenset):
            return f"frozenset({{{elements}}})" if value else "frozenset()"
        return f"{{{elements}}}" if value else "set()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringMappers):
            return NotImplemented
        return dict(self._mappers) == dict(other._mappers)

    def __hash__(self) -> int:
        return hash(tuple(self._mappers.items()))

    def __repr__(self) -> str:
        names = sorted(_type_name(cls) for cls in self._mappers)
        return f"StringMappers({names})"


def _type_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


StringMappers.DEFAULT = StringMappers()


__all__ = ["StringMapper", "StringMappers", "UnquotedStringValue"]
