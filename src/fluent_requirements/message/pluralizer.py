"""Singular and plural nouns for count-sensitive messages."""

from __future__ import annotations

from enum import Enum


class Pluralizer(Enum):
    """Nouns used when describing the size of a container."""

    ELEMENT = ("element", "elements")
    CHARACTER = ("character", "characters")
    ENTRY = ("entry", "entries")
    KEY = ("key", "keys")
    VALUE = ("value", "values")
    PATH = ("path", "paths")

    @property
    def singular(self) -> str:
        return self.value[0]

    @property
    def plural(self) -> str:
        return self.value[1]

    def name_of(self, count: int | None, name: str | None = None) -> str:
        """Return the noun for ``count`` items.

        Args:
            count: Number of items, or None if unknown
            name: Name of the operand the count came from. Named counts
                always read as plural ("at least "minimum" elements").
        """
        if name is None and count == 1:
            return self.singular
        return self.plural


__all__ = ["Pluralizer"]
