"""Input validation for the text exercises.

Each ``check_*`` helper inspects a caller-provided value without modifying
it and raises :class:`TextInputError` describing the first offending
element.
"""
from __future__ import annotations

from typing import Any, Iterable


class TextInputError(ValueError):
    """Raised when a text exercise receives malformed input."""


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful count or element here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_counts(numbers: Iterable[Any]) -> None:
    """Require every element to be a non-negative integer."""
    for idx, value in enumerate(numbers):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TextInputError(
                f"Expected an integer at index {idx}, got {type(value).__name__}: {value!r}"
            )
        if value < 0:
            raise TextInputError(f"Negative count at index {idx}: {value}")


def check_sentence(sentence: Any) -> None:
    """Require *sentence* to be a ``str``."""
    if not isinstance(sentence, str):
        raise TextInputError(
            f"Expected a sentence string, got {type(sentence).__name__}: {sentence!r}"
        )


def check_mixed(items: Iterable[Any]) -> None:
    """Require every element to be a string or a number."""
    for idx, value in enumerate(items):
        if not (isinstance(value, str) or _is_number(value)):
            raise TextInputError(
                f"Expected a string or number at index {idx}, "
                f"got {type(value).__name__}: {value!r}"
            )
