"""Pure text and sequence utilities.

All three exercises are synchronous and stateless: they never modify the
caller's containers and always build a fresh return value.

Examples:
    lots_of_smiles([1, 2])               -> "😀😀😀"
    longest_word("I ate a fez!")         -> "fez"
    reverse_strings(["abc", 1, "de"])    -> ["cba", 1, "ed"]
"""
from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Sequence

from ..config.models import TextConfig
from .validation import check_counts, check_mixed, check_sentence

logger = logging.getLogger(__name__)

# Anything that is not a letter or digit counts as punctuation.
_PUNCT_RE = re.compile(r"[\W_]+", re.UNICODE)


def tokenize(sentence: str) -> List[str]:
    """Split *sentence* on runs of whitespace."""
    return sentence.split()


def strip_punctuation(token: str) -> str:
    """Remove every non-alphanumeric character from *token*.

    ``"fez!"`` -> ``"fez"``, ``"'quoted'"`` -> ``"quoted"``
    """
    return _PUNCT_RE.sub("", token)


def lots_of_smiles(numbers: Sequence[int], config: Optional[TextConfig] = None) -> str:
    """Return one smile glyph per unit of ``sum(numbers)``.

    A sequence summing to zero (``[0]`` or ``[]``) yields ``""``.

    Raises
    ------
    TextInputError
        In strict mode, if any element is not a non-negative integer.
    """
    cfg = config or TextConfig()
    if cfg.strict:
        check_counts(numbers)

    total = sum(numbers)
    logger.debug("lots_of_smiles: %d values summing to %d", len(numbers), total)
    if total <= 0:
        return ""
    return cfg.smile_glyph * total


def longest_word(sentence: str, config: Optional[TextConfig] = None) -> str:
    """Return the longest word of *sentence* with punctuation removed.

    Words are compared by their stripped length. When several words share
    the maximum length the alphabetically first one wins, compared
    case-insensitively. A sentence without any words returns ``""``.

    Raises
    ------
    TextInputError
        In strict mode, if *sentence* is not a string.
    """
    cfg = config or TextConfig()
    if cfg.strict:
        check_sentence(sentence)

    words = [w for w in (strip_punctuation(t) for t in tokenize(sentence)) if w]
    if not words:
        logger.debug("longest_word: no words in %r", sentence)
        return ""

    best = min(words, key=lambda w: (-len(w), w.casefold(), w))
    logger.debug("longest_word: picked %r from %d words", best, len(words))
    return best


def reverse_strings(items: Sequence[Any], config: Optional[TextConfig] = None) -> List[Any]:
    """Reverse every string in *items*, passing numbers through untouched.

    Order and length are preserved and a new list is returned, so
    ``reverse_strings(reverse_strings(x)) == list(x)``.

    Raises
    ------
    TextInputError
        In strict mode, if an element is neither a string nor a number.
    """
    cfg = config or TextConfig()
    if cfg.strict:
        check_mixed(items)

    result = [item[::-1] if isinstance(item, str) else item for item in items]
    logger.debug("reverse_strings: processed %d items", len(result))
    return result
