"""Tests for plain text statistics."""

import pytest

from lexigraph.analysis.stats import compute_statistics, word_frequency
from lexigraph.errors import InvalidInputError


class TestStatistics:

    def test_counts(self):
        text = "The cat sat. The cat ran! Did the dog?"
        stats = compute_statistics(text)
        assert stats.word_count == 9
        assert stats.char_count == len(text)
        assert stats.sentence_count == 3
        assert stats.reading_time == 1

    def test_reading_time_rounds_up(self):
        stats = compute_statistics(" ".join(["word"] * 201))
        assert stats.reading_time == 2

    def test_top_words_normalized(self):
        stats = compute_statistics("The cat. the CAT, the dog!")
        assert stats.top_words[:2] == [("the", 3), ("cat", 2)]

    def test_top_words_limited(self):
        stats = compute_statistics("a b c d e f g h")
        assert len(stats.top_words) == 5

    def test_punctuation_only_tokens_ignored(self):
        assert word_frequency(["--", "...", "ok"]) == {"ok": 1}

    def test_output_shape(self):
        data = compute_statistics("Hello world.").to_dict()
        assert data == {
            "wordCount": 2,
            "charCount": 12,
            "sentenceCount": 1,
            "readingTime": 1,
            "topWords": [{"word": "hello", "count": 1}, {"word": "world", "count": 1}],
        }

    def test_empty_rejected(self):
        with pytest.raises(InvalidInputError):
            compute_statistics("   ")
