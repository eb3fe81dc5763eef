"""Plain text statistics: counts, reading time and most frequent words."""

from __future__ import annotations

import math
import re
from collections import Counter

from ..errors import validate_text
from .models import TextStatistics

WORDS_PER_MINUTE = 200

_SENTENCE_END = re.compile(r"[.!?]+")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def word_frequency(words: list[str]) -> dict[str, int]:
    """Lowercased, punctuation-stripped word counts, most frequent first."""
    counts = Counter()
    for word in words:
        clean = _NON_ALNUM.sub("", word.lower())
        if clean:
            counts[clean] += 1
    return dict(sorted(counts.items(), key=lambda x: -x[1]))


def compute_statistics(text: str, top_n: int = 5) -> TextStatistics:
    validate_text(text)

    words = text.split()
    sentences = [s for s in _SENTENCE_END.split(text) if s.strip()]
    freq = word_frequency(words)

    return TextStatistics(
        word_count=len(words),
        char_count=len(text),
        sentence_count=len(sentences),
        reading_time=math.ceil(len(words) / WORDS_PER_MINUTE),
        top_words=list(freq.items())[:top_n],
    )
