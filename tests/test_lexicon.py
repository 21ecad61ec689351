"""Tests for the lexical helpers."""

import pytest

from script_architect.lexicon import (
    STOP_WORDS,
    capitalize,
    clamp,
    count_words,
    is_stop_word,
    round_half_up,
    tokenize,
)


class TestTokenize:
    def test_lowercases_and_splits(self):
        assert tokenize("Neural Networks  learn") == ["neural", "networks", "learn"]

    def test_punctuation_becomes_a_separator(self):
        assert tokenize("AI-powered tools!") == ["ai", "powered", "tools"]

    def test_non_ascii_letters_are_dropped(self):
        assert tokenize("café data") == ["caf", "data"]

    def test_empty_text(self):
        assert tokenize("   ") == []


class TestStopWords:
    def test_membership(self):
        assert is_stop_word("the")
        assert is_stop_word("just")
        assert not is_stop_word("data")

    def test_closed_set_size(self):
        assert len(STOP_WORDS) == 30


class TestCapitalize:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("warm, reassuring narration", "Warm, reassuring narration"),
            ("machine learning", "Machine learning"),
            ("AI basics", "AI basics"),
            ("", ""),
        ],
    )
    def test_only_first_character_changes(self, value, expected):
        assert capitalize(value) == expected


class TestNumbers:
    def test_clamp(self):
        assert clamp(2, 4, 9) == 4
        assert clamp(12, 4, 9) == 9
        assert clamp(6, 4, 9) == 6

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(1.48) == 1
        assert round_half_up(0) == 0

    def test_count_words(self):
        assert count_words("  It predicts\noutcomes. ") == 3
        assert count_words("") == 0
