"""Failure message rendering.

Each ``*_messages`` module renders the failures of one family of checks;
:mod:`~fluent_requirements.message.builder` assembles the final text.
"""

from fluent_requirements.message.builder import MessageBuilder, quote_name
from fluent_requirements.message.diff import DIFF_LEGEND, DiffGenerator, DiffResult
from fluent_requirements.message.pluralizer import Pluralizer

__all__ = [
    "DIFF_LEGEND",
    "DiffGenerator",
    "DiffResult",
    "MessageBuilder",
    "Pluralizer",
    "quote_name",
]
