"""
Tests for greedy word wrapping.
"""

import pytest

from receipt_text.core.text_utils import wrap_text


SAMPLE = (
    "Thank you for shopping with us today please keep this receipt "
    "for returns within thirty days of purchase"
)


class TestWrapText:
    """Tests for wrap_text()."""

    def test_two_lines(self):
        """Words are packed greedily."""
        assert wrap_text("the quick brown fox", 10) == ["the quick", "brown fox"]

    def test_oversized_word_unsplit(self):
        """A word longer than the line is never split."""
        word = "supercalifragilisticexpialidocious"
        assert wrap_text(word, 10) == [word]

    def test_oversized_word_between_short_words(self):
        """The long word gets its own line; neighbours wrap around it."""
        assert wrap_text("a verylongword b", 5) == ["a", "verylongword", "b"]

    def test_no_width_returns_whole_text(self):
        """Without a width the text is one line, unchanged."""
        text = "  spaces  and\ttabs stay  "
        assert wrap_text(text) == [text]
        assert wrap_text(text, None) == [text]

    def test_empty_text_gives_no_lines(self):
        """Empty text with wrapping yields nothing."""
        assert wrap_text("", 10) == []

    def test_empty_text_zero_width(self):
        """Empty text yields nothing even when no word can fit."""
        assert wrap_text("", 0) == []
        assert wrap_text("", 1) == []

    def test_empty_text_without_width(self):
        """Empty text without wrapping is still one (empty) line."""
        assert wrap_text("") == [""]

    def test_word_filling_whole_line_stands_alone(self):
        """The separator counts for the first word too, so a W-char word is alone."""
        assert wrap_text("abcde fg", 5) == ["abcde", "fg"]

    def test_fits_exactly_with_separator(self):
        """A line may reach W-1 characters plus the trailing separator budget."""
        assert wrap_text("ab cd ef", 6) == ["ab cd", "ef"]

    def test_double_spaces_preserved(self):
        """Only the single space is a separator; runs are kept."""
        assert wrap_text("a  b", 10) == ["a  b"]

    def test_tabs_and_newlines_are_word_characters(self):
        """Tabs and newlines are not split on."""
        assert wrap_text("a\tb c\nd", 20) == ["a\tb c\nd"]

    def test_negative_width_rejected(self):
        """Negative widths are a caller error."""
        with pytest.raises(ValueError):
            wrap_text("text", -1)

    def test_non_int_width_rejected(self):
        """Widths must be integers."""
        with pytest.raises(ValueError):
            wrap_text("text", 4.5)


class TestWrapProperties:
    """Properties that hold for any width."""

    @pytest.mark.parametrize("width", [1, 3, 8, 12, 20, 48])
    def test_lines_within_width(self, width):
        """Every line fits, except a lone word that is itself too long."""
        for line in wrap_text(SAMPLE, width):
            assert len(line) <= width or " " not in line

    @pytest.mark.parametrize("width", [1, 3, 8, 12, 20, 48])
    def test_rejoin_preserves_words(self, width):
        """Joining the lines gives back the original words."""
        lines = wrap_text(SAMPLE, width)
        assert " ".join(lines).split(" ") == SAMPLE.split(" ")

    def test_wide_enough_is_single_line(self):
        """Text shorter than the width is left on one line."""
        assert wrap_text(SAMPLE, len(SAMPLE) + 1) == [SAMPLE]
