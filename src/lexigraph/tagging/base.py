"""
Tagger Capability
=================

The analysis modules never talk to an NLP library directly. They consume a
:class:`TaggedText`, produced once per analysis call by a :class:`Tagger`.
A tagger must provide:

    sentences
        Ordered sentence segmentation of the input text.
    words
        Word tokens of the text (punctuation removed). Style ratios are
        taken over this count, so it must use the same tokenization as the
        tag counts.
    noun_frequencies / verb_frequencies
        ``(lemma, count)`` pairs ranked by count, descending, with ties
        kept in first-occurrence order. Lemmas are lowercased base forms.
    count(*tags)
        Number of tokens (or constructions, for voice) carrying any of the
        named grammatical tags. Tag names are listed in :data:`TAGS`.

Any implementation honouring this contract (rule based, statistical or
learned) can be passed to the analysis entry points via ``tagger=``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

#: Grammatical tag names a tagger reports counts for.
TAGS: tuple[str, ...] = (
    "passive",
    "active",
    "honorific",
    "pronoun",
    "conjunction",
    "slang",
    "expression",
)


def rank_frequencies(lemmas: Iterable[str]) -> list[tuple[str, int]]:
    """Count lemmas and rank them by count, descending.

    ``Counter`` keeps insertion order and ``sorted`` is stable, so lemmas
    with equal counts stay in order of first occurrence.
    """
    counts = Counter(lemmas)
    return sorted(counts.items(), key=lambda item: -item[1])


@dataclass
class TaggedText:
    """The result of a single tagging pass over a document."""
    text: str
    sentences: list[str]
    words: list[str]
    noun_frequencies: list[tuple[str, int]] = field(default_factory=list)
    verb_frequencies: list[tuple[str, int]] = field(default_factory=list)
    tag_counts: dict[str, int] = field(default_factory=dict)

    def count(self, *tags: str) -> int:
        """Total number of tokens carrying any of ``tags``."""
        unknown = [t for t in tags if t not in TAGS]
        if unknown:
            raise ValueError(f"Unknown tag(s): {unknown}. Known tags: {list(TAGS)}")
        return sum(self.tag_counts.get(t, 0) for t in tags)


class Tagger(ABC):
    """Tokenizer/POS-tagger capability used by the analysis pipeline."""

    @abstractmethod
    def tag(self, text: str) -> TaggedText:
        """Segment, tokenize and tag ``text`` in one pass."""
