"""Named input/expected-output fixtures for the text exercises."""
from .loader import (
    LongestWordFixture,
    ReverseStringsFixture,
    available_fixtures,
    load_fixture,
    load_longest_word_fixture,
    load_reverse_strings_fixture,
)

__all__ = [
    "LongestWordFixture",
    "ReverseStringsFixture",
    "available_fixtures",
    "load_fixture",
    "load_longest_word_fixture",
    "load_reverse_strings_fixture",
]
