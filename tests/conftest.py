"""Shared fixtures for the text exercise test suite.

Provides the bundled fixture data, configuration objects, and a seeded
random generator for property-style checks.
"""

import random

import pytest

from exercises.config.models import TextConfig
from exercises.fixtures import load_longest_word_fixture, load_reverse_strings_fixture


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strict_config():
    return TextConfig()


@pytest.fixture
def lenient_config():
    """Configuration that skips input validation."""
    return TextConfig(strict=False)


# ---------------------------------------------------------------------------
# Bundled data
# ---------------------------------------------------------------------------

@pytest.fixture
def longest_word_data():
    return load_longest_word_fixture()


@pytest.fixture
def reverse_strings_data():
    return load_reverse_strings_fixture()


@pytest.fixture
def rng():
    """Seeded RNG so randomised cases are reproducible."""
    return random.Random(20241018)
