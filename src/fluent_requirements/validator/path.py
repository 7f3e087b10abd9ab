"""Checks for filesystem paths.

``exists``, ``is_regular_file`` and ``is_directory`` query the filesystem
synchronously.
"""

from __future__ import annotations

from pathlib import Path

from typing_extensions import Self

from fluent_requirements.message import path_messages
from fluent_requirements.validator.base import ObjectValidator


class PathValidator(ObjectValidator):
    """Validates ``pathlib`` paths."""

    def exists(self) -> Self:
        return self._require(lambda path: Path(path).exists(), lambda: path_messages.exists(self))

    def does_not_exist(self) -> Self:
        return self._require(
            lambda path: not Path(path).exists(), lambda: path_messages.does_not_exist(self)
        )

    def is_regular_file(self) -> Self:
        return self._require(
            lambda path: Path(path).is_file(), lambda: path_messages.is_regular_file(self)
        )

    def is_directory(self) -> Self:
        return self._require(
            lambda path: Path(path).is_dir(), lambda: path_messages.is_directory(self)
        )

    def is_relative(self) -> Self:
        return self._require(
            lambda path: not path.is_absolute(), lambda: path_messages.is_relative(self)
        )

    def is_absolute(self) -> Self:
        return self._require(lambda path: path.is_absolute(), lambda: path_messages.is_absolute(self))
