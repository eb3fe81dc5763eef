"""
Tagging Package
===============

Tokenizer/POS-tagger capability consumed by the analysis modules.

    Tagger, TaggedText
        The capability interface and the per-call result it produces.

    NLTKTagger
        Default English implementation on NLTK.
"""

from .base import TAGS, Tagger, TaggedText, rank_frequencies
from .nltk_tagger import NLTKTagger, ensure_nltk_data

__all__ = [
    "TAGS",
    "Tagger",
    "TaggedText",
    "rank_frequencies",
    "NLTKTagger",
    "ensure_nltk_data",
]
