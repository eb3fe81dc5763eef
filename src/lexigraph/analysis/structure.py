"""
Structural Analysis
===================

Sentence-level structure scores for a document.

    calculate_complexity
        Average words per sentence, bucketed into basic / intermediate /
        advanced.

    determine_flow
        Share of sentences carrying a discourse marker ("however",
        "moreover", "therefore"), bucketed into linear / branching /
        circular.

    measure_coherence
        Lexical overlap between consecutive sentences, a proxy for topical
        continuity. Always in [0, 1].

All three split on single spaces and compare lowercased surface words. No
stopwords are removed, so short function words contribute to the overlap.
"""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)

#: Discourse markers that signal a turn in the argument.
FLOW_MARKERS: tuple[str, ...] = ("however", "moreover", "therefore")

BASIC_MAX_WORDS = 10
INTERMEDIATE_MAX_WORDS = 20

LINEAR_MAX_RATIO = 0.1
BRANCHING_MAX_RATIO = 0.2


def calculate_complexity(sentences: list[str]) -> str:
    """Classify average sentence length.

    An empty sentence list averages to 0 words and is classified ``basic``.
    """
    if not sentences:
        return "basic"

    avg_length = sum(len(s.split(" ")) for s in sentences) / len(sentences)
    if avg_length < BASIC_MAX_WORDS:
        return "basic"
    if avg_length < INTERMEDIATE_MAX_WORDS:
        return "intermediate"
    return "advanced"


def determine_flow(sentences: list[str]) -> str:
    """Classify narrative flow by the share of marker-bearing sentences."""
    transitions = sum(
        1 for s in sentences
        if any(marker in s.lower() for marker in FLOW_MARKERS)
    )

    if transitions < len(sentences) * LINEAR_MAX_RATIO:
        return "linear"
    if transitions < len(sentences) * BRANCHING_MAX_RATIO:
        return "branching"
    return "circular"


def measure_coherence(sentences: list[str]) -> float:
    """Mean word-set overlap between each pair of consecutive sentences.

    For a pair (prev, curr) the overlap is
    ``|prev & curr| / max(|prev|, |curr|)``. Fewer than two sentences have
    no pairs to compare and score 0.0.
    """
    if len(sentences) < 2:
        return 0.0

    scores = []
    for prev, curr in zip(sentences, sentences[1:]):
        prev_words = set(prev.lower().split(" "))
        curr_words = set(curr.lower().split(" "))
        overlap = len(prev_words & curr_words)
        scores.append(overlap / max(len(prev_words), len(curr_words)))

    return float(np.mean(scores))
