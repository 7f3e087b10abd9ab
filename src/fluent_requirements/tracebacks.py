"""Removal of this package's frames from exception tracebacks."""

from __future__ import annotations

import functools
from types import FrameType, TracebackType
from typing import Any, Callable, List, Set, Tuple, TypeVar, cast

PACKAGE = "fluent_requirements"

E = TypeVar("E", bound=BaseException)
F = TypeVar("F", bound=Callable[..., Any])


def is_library_frame(frame: FrameType) -> bool:
    """Return True if ``frame`` executes code from this package."""
    module = frame.f_globals.get("__name__", "")
    return module == PACKAGE or module.startswith(PACKAGE + ".")


def clean_traceback(exception: E) -> E:
    """Drop this package's frames from ``exception`` and the exceptions it chains to.

    Follows ``__cause__``, ``__context__`` and the members of composite
    exceptions. A traceback made up only of library frames is left as is.

    Args:
        exception: The exception to clean, modified in place

    Returns:
        The same exception
    """
    _clean(exception, set())
    return exception


def cleans_traceback(method: F) -> F:
    """Strip library frames from exceptions the library raises through ``method``.

    ``method`` must belong to an object with a ``configuration``. When its
    ``clean_stack_trace`` is set, an exception raised by library code loses
    every library frame below this call, and pytest hides the call itself.
    Exceptions raised by caller code (a custom comparator, a string mapper)
    pass through untouched.
    """

    @functools.wraps(method)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
        clean = self.configuration.clean_stack_trace
        __tracebackhide__ = clean
        try:
            return method(self, *args, **kwargs)
        except Exception as e:
            if not clean or not _raised_by_library(e):
                raise
            seen: Set[int] = {id(e)}
            _clean(e.__cause__, seen)
            _clean(e.__context__, seen)
            raise e.with_traceback(_caller_frames(e.__traceback__))

    wrapper.__wrapped_cleans_traceback__ = True  # type: ignore[attr-defined]
    return cast(F, wrapper)


def clean_public_methods(cls: type) -> None:
    """Apply :func:`cleans_traceback` to the public methods defined by ``cls``.

    Properties, static methods, class methods and methods that are already
    wrapped are skipped.
    """
    for name, attribute in list(vars(cls).items()):
        if name.startswith("_") or not callable(attribute) or isinstance(attribute, type):
            continue
        if isinstance(attribute, (staticmethod, classmethod)):
            continue
        if getattr(attribute, "__wrapped_cleans_traceback__", False):
            continue
        setattr(cls, name, cleans_traceback(attribute))


def _raised_by_library(exception: BaseException) -> bool:
    tb = exception.__traceback__
    if tb is None:
        return False
    while tb.tb_next is not None:
        tb = tb.tb_next
    return is_library_frame(tb.tb_frame)


def _frames(tb: TracebackType | None) -> Tuple[List[Tuple[FrameType, int, int]], int]:
    frames: List[Tuple[FrameType, int, int]] = []
    total = 0
    while tb is not None:
        total += 1
        if not is_library_frame(tb.tb_frame):
            frames.append((tb.tb_frame, tb.tb_lasti, tb.tb_lineno))
        tb = tb.tb_next
    return frames, total


def _link(frames: List[Tuple[FrameType, int, int]]) -> TracebackType | None:
    linked: TracebackType | None = None
    for frame, lasti, lineno in reversed(frames):
        linked = TracebackType(linked, frame, lasti, lineno)
    return linked


def _caller_frames(tb: TracebackType | None) -> TracebackType | None:
    frames, _ = _frames(tb)
    return _link(frames)


def _clean(exception: BaseException | None, seen: Set[int]) -> None:
    if exception is None or id(exception) in seen:
        return
    seen.add(id(exception))

    frames, total = _frames(exception.__traceback__)
    if frames and len(frames) != total:
        exception.__traceback__ = _link(frames)

    _clean(exception.__cause__, seen)
    _clean(exception.__context__, seen)
    for member in getattr(exception, "exceptions", None) or ():
        if isinstance(member, BaseException):
            _clean(member, seen)


__all__ = ["clean_public_methods", "clean_traceback", "cleans_traceback", "is_library_frame"]
