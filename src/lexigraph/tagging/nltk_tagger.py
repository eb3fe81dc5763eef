"""
NLTK Tagger
===========

Default :class:`~lexigraph.tagging.base.Tagger` built on NLTK.

    Sentences      nltk.sent_tokenize (Punkt)
    Tokens         nltk.word_tokenize (Treebank)
    POS tags       nltk.pos_tag (averaged perceptron, Penn Treebank tagset)
    Lemmas         WordNetLemmatizer, lowercased

Noun (NN*) and verb (VB*) tokens feed the lemma rankings. The remaining Penn
tags are mapped onto the coarse tag names of :data:`TAGS`:

    pronoun        PRP, PRP$, WP, WP$
    conjunction    CC
    expression     UH, or a known interjection
    honorific      title words (Mr, Dr, Sir, ...)
    slang          known informal words, matched on whitespace tokens
                   because the Treebank tokenizer splits "gonna" into
                   "gon" + "na"
    passive        a form of "be"/"get" followed, optionally across
                   adverbs, by a past participle (VBN)
    active         main verbs outside any passive construction; an
                   auxiliary directly followed by another verb is not
                   counted
"""

from __future__ import annotations

import logging
import re
from typing import Optional

import nltk
from nltk.stem import WordNetLemmatizer

from ..config import TaggerConfig
from .base import TAGS, Tagger, TaggedText, rank_frequencies

logger = logging.getLogger(__name__)

# (lookup path, download id). Different NLTK releases ship the Punkt and
# perceptron models under different ids, so both variants are listed.
NLTK_RESOURCES: list[tuple[str, str]] = [
    ("tokenizers/punkt", "punkt"),
    ("tokenizers/punkt_tab", "punkt_tab"),
    ("taggers/averaged_perceptron_tagger", "averaged_perceptron_tagger"),
    ("taggers/averaged_perceptron_tagger_eng", "averaged_perceptron_tagger_eng"),
    ("corpora/wordnet", "wordnet"),
]

NOUN_TAGS = {"NN", "NNS", "NNP", "NNPS"}
VERB_TAGS = {"VB", "VBD", "VBG", "VBN", "VBP", "VBZ"}
PRONOUN_TAGS = {"PRP", "PRP$", "WP", "WP$"}
CONJUNCTION_TAGS = {"CC"}
ADVERB_TAGS = {"RB", "RBR", "RBS"}

PASSIVE_AUXILIARIES = {
    "be", "am", "is", "are", "was", "were", "been", "being",
    "get", "gets", "got", "gotten", "getting",
}

HONORIFICS = {
    "mr", "mrs", "ms", "miss", "mx", "dr", "prof", "professor",
    "sir", "madam", "dame", "lord", "lady", "rev", "hon", "esq",
}

INTERJECTIONS = {
    "oh", "wow", "hey", "ouch", "oops", "hmm", "huh", "whoa", "yay",
    "ugh", "alas", "hooray", "aha", "haha", "hi", "hello", "bye",
}

SLANG = {
    "gonna", "wanna", "gotta", "kinda", "sorta", "dunno", "lemme", "gimme",
    "y'all", "ain't", "lol", "omg", "btw", "dude", "awesome", "cool",
    "yeah", "yep", "nope", "nah", "stuff", "guys", "totally", "super",
}

_WORD_EDGES = re.compile(r"^[^\w']+|[^\w']+$")

_DATA_CHECKED = False


def ensure_nltk_data(auto_download: bool = True) -> None:
    """Make sure the NLTK models the tagger needs are installed.

    Missing resources are downloaded quietly when ``auto_download`` is set.
    Otherwise nothing happens here and the first tokenizer call raises the
    usual NLTK ``LookupError``. The check is only cached once every resource
    has been found or downloaded.
    """
    global _DATA_CHECKED
    if _DATA_CHECKED:
        return

    complete = True
    for path, package in NLTK_RESOURCES:
        try:
            nltk.data.find(path)
        except LookupError:
            if not auto_download:
                logger.debug(f"NLTK resource {package} not installed")
                complete = False
                continue
            logger.info(f"Downloading NLTK resource: {package}")
            if not nltk.download(package, quiet=True):
                logger.warning(f"Failed to download NLTK resource: {package}")
                complete = False

    _DATA_CHECKED = complete


class NLTKTagger(Tagger):
    """
    English tagger backed by NLTK's tokenizers, perceptron POS tagger and
    WordNet lemmatizer.

    Parameters
    ----------
    auto_download : bool
        Download missing NLTK data on first use.
    excluded_verbs : list[str], optional
        Verb lemmas left out of the verb frequency ranking. Auxiliaries
        ("be", "have", "do") dominate any English text and would otherwise
        crowd content verbs out of the concept list.
    """

    def __init__(
        self,
        auto_download: bool = True,
        excluded_verbs: Optional[list[str]] = None,
    ):
        self.auto_download = auto_download
        self.excluded_verbs = set(
            excluded_verbs if excluded_verbs is not None else ["be", "have", "do"]
        )
        self._lemmatizer: Optional[WordNetLemmatizer] = None

    @classmethod
    def from_config(cls, config: Optional[TaggerConfig] = None) -> NLTKTagger:
        config = config or TaggerConfig()
        return cls(
            auto_download=config.auto_download,
            excluded_verbs=config.excluded_verbs,
        )

    @property
    def lemmatizer(self) -> WordNetLemmatizer:
        if self._lemmatizer is None:
            self._lemmatizer = WordNetLemmatizer()
        return self._lemmatizer

    def tag(self, text: str) -> TaggedText:
        ensure_nltk_data(self.auto_download)

        sentences = [s.strip() for s in nltk.sent_tokenize(text) if s.strip()]

        words: list[str] = []
        nouns: list[str] = []
        verbs: list[str] = []
        counts = dict.fromkeys(TAGS, 0)

        for sentence in sentences:
            tagged = nltk.pos_tag(nltk.word_tokenize(sentence))

            for token, pos in tagged:
                lower = token.lower()
                bare = lower.rstrip(".")

                if any(ch.isalnum() for ch in token):
                    words.append(token)

                if pos in NOUN_TAGS and token.isalpha():
                    nouns.append(self.lemmatizer.lemmatize(lower, "n"))
                elif pos in VERB_TAGS and token.isalpha():
                    lemma = self.lemmatizer.lemmatize(lower, "v")
                    if lemma not in self.excluded_verbs:
                        verbs.append(lemma)

                if pos in PRONOUN_TAGS:
                    counts["pronoun"] += 1
                if pos in CONJUNCTION_TAGS:
                    counts["conjunction"] += 1
                if bare in HONORIFICS:
                    counts["honorific"] += 1
                if pos == "UH" or lower in INTERJECTIONS:
                    counts["expression"] += 1

            for raw in sentence.split():
                if _WORD_EDGES.sub("", raw.lower()) in SLANG:
                    counts["slang"] += 1

            passive, active = _count_voice(tagged)
            counts["passive"] += passive
            counts["active"] += active

        logger.debug(
            f"Tagged {len(sentences)} sentences, {len(words)} words, "
            f"{len(set(nouns))} noun lemmas, {len(set(verbs))} verb lemmas"
        )

        return TaggedText(
            text=text,
            sentences=sentences,
            words=words,
            noun_frequencies=rank_frequencies(nouns),
            verb_frequencies=rank_frequencies(verbs),
            tag_counts=counts,
        )


def _count_voice(tagged: list[tuple[str, str]]) -> tuple[int, int]:
    """Count passive constructions and active main verbs in one sentence."""
    passive = 0
    active = 0
    in_passive: set[int] = set()

    for i, (token, pos) in enumerate(tagged):
        if token.lower() not in PASSIVE_AUXILIARIES:
            continue
        j = i + 1
        while j < len(tagged) and (tagged[j][1] in ADVERB_TAGS or tagged[j][0].lower() == "not"):
            j += 1
        if j < len(tagged) and tagged[j][1] == "VBN":
            passive += 1
            in_passive.update((i, j))

    for i, (token, pos) in enumerate(tagged):
        if pos not in VERB_TAGS or i in in_passive:
            continue
        j = i + 1
        while j < len(tagged) and tagged[j][1] in ADVERB_TAGS:
            j += 1
        # auxiliary ("has gone", "did see")
        if j < len(tagged) and tagged[j][1] in VERB_TAGS:
            continue
        active += 1

    return passive, active
