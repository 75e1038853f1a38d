"""Load the JSON fixtures shipped in ``exercises/fixtures/data``.

Usage::

    from exercises.fixtures import load_longest_word_fixture

    data = load_longest_word_fixture()
    print(data.same_length)
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent / "data"

Mixed = List[Union[str, int, float]]


class LongestWordFixture(BaseModel):
    """Sentences for ``longest_word``, keyed by the case they exercise."""

    model_config = ConfigDict(populate_by_name=True)

    different_length: str = Field(alias="differentLength")
    same_length: str = Field(alias="sameLength")
    punctuation: str


class ReverseStringsFixture(BaseModel):
    """Paired sequences for ``reverse_strings``.

    ``forwards``/``backwards`` and ``mixed_forwards``/``mixed_backwards``
    are reverses of each other; ``numbers`` holds no strings at all.
    """

    model_config = ConfigDict(populate_by_name=True)

    forwards: List[str]
    backwards: List[str]
    numbers: List[Union[int, float]]
    mixed_forwards: Mixed = Field(alias="mixedForwards")
    mixed_backwards: Mixed = Field(alias="mixedBackwards")


def available_fixtures() -> List[str]:
    """Return the names of every bundled fixture, sorted."""
    return sorted(p.stem for p in _DATA_DIR.glob("*.json"))


def load_fixture(name: str) -> Dict[str, Any]:
    """Return the raw contents of fixture *name* (without ``.json``).

    Raises
    ------
    FileNotFoundError
        If no fixture with that name is bundled.
    """
    path = _DATA_DIR / f"{name}.json"
    if not path.is_file():
        available = ", ".join(available_fixtures())
        raise FileNotFoundError(f"Unknown fixture '{name}'. Available: {available}")

    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    logger.info("Loaded fixture %s (%d keys)", name, len(data))
    return data


def load_longest_word_fixture() -> LongestWordFixture:
    return LongestWordFixture.model_validate(load_fixture("longest-word"))


def load_reverse_strings_fixture() -> ReverseStringsFixture:
    return ReverseStringsFixture.model_validate(load_fixture("reverse-strings"))
