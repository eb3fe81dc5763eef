"""
Shared test fixtures.

Analysis tests run against a scripted tagger so that results do not depend
on which NLTK models happen to be installed.
"""

import re
from typing import Optional

import pytest

from lexigraph.tagging import Tagger, TaggedText


class ScriptedTagger(Tagger):
    """Tagger returning fixed rankings and tag counts for any text.

    Sentences are split after ., ! or ? followed by whitespace unless an
    explicit sentence list is given.
    """

    def __init__(
        self,
        nouns: Optional[list[tuple[str, int]]] = None,
        verbs: Optional[list[tuple[str, int]]] = None,
        tag_counts: Optional[dict[str, int]] = None,
        sentences: Optional[list[str]] = None,
    ):
        self.nouns = nouns or []
        self.verbs = verbs or []
        self.tag_counts = tag_counts or {}
        self.sentences = sentences
        self.calls = 0

    def tag(self, text: str) -> TaggedText:
        self.calls += 1
        if self.sentences is not None:
            sentences = list(self.sentences)
        else:
            sentences = [s.strip() for s in re.split(r"(?<=[.!?])\s+", text.strip()) if s.strip()]
        return TaggedText(
            text=text,
            sentences=sentences,
            words=re.findall(r"[A-Za-z0-9']+", text),
            noun_frequencies=list(self.nouns),
            verb_frequencies=list(self.verbs),
            tag_counts=dict(self.tag_counts),
        )


class BrokenTagger(Tagger):
    def tag(self, text: str) -> TaggedText:
        raise RuntimeError("tagger exploded")


CATS_TEXT = "Cats are mammals. Cats have fur. However, dogs differ."
CATS_NOUNS = [("cat", 2), ("mammal", 1), ("fur", 1), ("dog", 1)]
CATS_VERBS = [("differ", 1)]


@pytest.fixture
def cats_tagger() -> ScriptedTagger:
    return ScriptedTagger(nouns=CATS_NOUNS, verbs=CATS_VERBS)


@pytest.fixture
def make_tagger():
    return ScriptedTagger


@pytest.fixture
def broken_tagger() -> BrokenTagger:
    return BrokenTagger()
