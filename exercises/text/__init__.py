"""Text exercises - smiles, longest word, and string reversal.

Public API
----------
.. autofunction:: lots_of_smiles
.. autofunction:: longest_word
.. autofunction:: reverse_strings
"""
from .utils import (
    longest_word,
    lots_of_smiles,
    reverse_strings,
    strip_punctuation,
    tokenize,
)
from .validation import TextInputError

__all__ = [
    "lots_of_smiles",
    "longest_word",
    "reverse_strings",
    "strip_punctuation",
    "tokenize",
    "TextInputError",
]
