"""
Tests for music_catalog.core.ordering.
"""

import pytest

from music_catalog.core import ValidationError
from music_catalog.core.catalog import Song
from music_catalog.core.ordering import (
    SORT_CRITERIA,
    collation_key,
    song_sort_key,
    validate_criterion,
)


class TestCollationKey:
    """Tests for locale-style string collation."""

    def test_case_insensitive_first(self) -> None:
        """Letters should matter before case."""
        words = ["banana", "Apple", "cherry"]
        assert sorted(words, key=collation_key) == ["Apple", "banana", "cherry"]

    def test_lowercase_before_uppercase(self) -> None:
        """Words differing only in case should put lowercase first."""
        assert sorted(["Abc", "abc"], key=collation_key) == ["abc", "Abc"]

    def test_accents_after_base_letters(self) -> None:
        """Accented letters should sort next to their base letter."""
        words = ["f", "émile", "emile", "d"]
        assert sorted(words, key=collation_key) == ["d", "emile", "émile", "f"]

    def test_equal_strings_equal_keys(self) -> None:
        assert collation_key("test abc") == collation_key("test abc")


class TestCriteria:
    """Tests for criterion validation and key selection."""

    @pytest.mark.parametrize("criterion", SORT_CRITERIA)
    def test_valid(self, criterion: str) -> None:
        assert validate_criterion(criterion) == criterion

    @pytest.mark.parametrize("criterion", ["genre", "favorite", "", None, "Title"])
    def test_invalid(self, criterion: object) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_criterion(criterion)
        assert exc_info.value.value == criterion
        assert exc_info.value.allowed == SORT_CRITERIA

    def test_message_lists_allowed(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_criterion("genre")
        assert str(exc_info.value) == "Invalid criterion: genre. Must be one of: title, artist, duration"

    def test_duration_key_numeric(self) -> None:
        song = Song(title="t", artist="a", genre="g", duration=42)
        assert song_sort_key("duration")(song) == 42

    def test_artist_key(self) -> None:
        song = Song(title="t", artist="Queen", genre="g", duration=1)
        assert song_sort_key("artist")(song) == collation_key("Queen")

    def test_key_for_invalid_criterion(self) -> None:
        with pytest.raises(ValidationError):
            song_sort_key("genre")  # type: ignore[arg-type]
