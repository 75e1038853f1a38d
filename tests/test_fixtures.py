"""Tests for exercises.fixtures -- bundled JSON fixture loading."""

import pytest

from exercises.fixtures import (
    LongestWordFixture,
    ReverseStringsFixture,
    available_fixtures,
    load_fixture,
    load_longest_word_fixture,
    load_reverse_strings_fixture,
)


class TestLoadFixture:
    def test_available(self):
        assert available_fixtures() == ["longest-word", "reverse-strings"]

    def test_raw_keys_preserved(self):
        data = load_fixture("longest-word")
        assert set(data) == {"differentLength", "sameLength", "punctuation"}

    def test_unknown_name(self):
        with pytest.raises(FileNotFoundError, match="Available"):
            load_fixture("missing")


class TestFixtureModels:
    def test_longest_word_model(self):
        data = load_longest_word_fixture()
        assert isinstance(data, LongestWordFixture)
        assert "flame" in data.different_length

    def test_reverse_strings_model(self):
        data = load_reverse_strings_fixture()
        assert isinstance(data, ReverseStringsFixture)
        assert len(data.forwards) == len(data.backwards)
        assert len(data.mixed_forwards) == len(data.mixed_backwards)

    def test_mixed_numbers_keep_type(self):
        data = load_reverse_strings_fixture()
        assert data.mixed_forwards[1] == 1
        assert isinstance(data.mixed_forwards[1], int)
        assert isinstance(data.mixed_forwards[3], float)

    def test_populate_by_field_name(self):
        model = LongestWordFixture(different_length="a", same_length="b", punctuation="c")
        assert model.same_length == "b"
