"""
Content and Style Analysis
==========================

The infographic-oriented branch of the pipeline. Independent of the concept
graph; it only needs the tagger output and the raw text.

    Structure
        Paragraph count (blocks separated by blank lines), section count
        (paragraphs whose first line looks like a heading) and a
        readability class.

    Readability
        Simplified Flesch reading ease::

            206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)

        Words are whitespace-separated tokens. Syllables are approximated by
        counting vowel clusters over all words glued together, so clusters
        can run across word boundaries. Scores above 70 are ``easy``, above
        50 ``moderate``, anything else ``complex``.

    Topics
        The most frequent noun lemmas, each with a relevance (count divided
        by the number of distinct noun lemmas) and the first sentence that
        mentions it.

    Style
        tone       professional when honorifics + pronouns + conjunctions
                   outnumber slang + expressions, else conversational
        voice      passive when passive constructions outnumber active
                   verbs, else active
        formality  formal above 20% formal tokens, casual above 10%
                   casual tokens, else neutral

    Suggestions
        A fixed rule list evaluated in order; each rule adds at most one
        message, and a placeholder is used when none fires.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..config import ContentConfig, TaggerConfig
from ..errors import AnalysisError, InvalidInputError, validate_text
from ..tagging import NLTKTagger, Tagger, TaggedText
from .models import ContentAnalysis, StyleProfile, Topic

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
HEADING_PATTERN = re.compile(r"^[A-Z][\w\s]+:?$", re.MULTILINE)
VOWEL_CLUSTER = re.compile(r"[aeiou]+", re.IGNORECASE)

KEY_POINT_MARKERS: tuple[str, ...] = ("important", "key", "main", "essential")

EASY_MIN_SCORE = 70
MODERATE_MIN_SCORE = 50
FORMAL_RATIO = 0.2
CASUAL_RATIO = 0.1

DEFAULT_THEME = "General Content"
NO_KEY_POINTS = "No explicit key points found"

SUGGEST_SECTIONS = "Consider adding clear section headers to improve structure"
SUGGEST_KEY_POINTS = "Consider highlighting key points more explicitly"
SUGGEST_ACTIVE_VOICE = "Consider using more active voice for better engagement"
SUGGEST_TONE_MISMATCH = "Content complexity might not match the casual tone"
WELL_ORGANIZED = "Content structure appears well-organized"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

def split_paragraphs(text: str) -> list[str]:
    return [p for p in PARAGRAPH_BREAK.split(text) if p.strip()]


def count_sections(paragraphs: list[str]) -> int:
    """Paragraphs whose first line is heading-like ("Title words", optional colon)."""
    return sum(
        1 for p in paragraphs
        if HEADING_PATTERN.search(p.strip().split("\n")[0])
    )


def readability_score(words: list[str], sentence_count: int) -> float:
    """Simplified Flesch reading ease.

    Raises:
        InvalidInputError: When there are no sentences or no words.
    """
    if sentence_count == 0 or not words:
        raise InvalidInputError("Invalid input: text contains no sentences or words")

    syllables = len(VOWEL_CLUSTER.findall("".join(words)))
    return (
        206.835
        - 1.015 * (len(words) / sentence_count)
        - 84.6 * (syllables / len(words))
    )


def classify_readability(score: float) -> str:
    if score > EASY_MIN_SCORE:
        return "easy"
    if score > MODERATE_MIN_SCORE:
        return "moderate"
    return "complex"


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

def find_key_points(sentences: list[str], limit: int = 3) -> list[str]:
    """Sentences that flag themselves as important. Case-sensitive match."""
    return [
        s for s in sentences
        if any(marker in s for marker in KEY_POINT_MARKERS)
    ][:limit]


def extract_topics(
    noun_frequencies: list[tuple[str, int]],
    sentences: list[str],
    limit: int = 5,
) -> list[Topic]:
    topics = []
    for lemma, count in noun_frequencies[:limit]:
        context = next((s for s in sentences if lemma.lower() in s.lower()), "")
        topics.append(Topic(
            topic=lemma,
            relevance=count / len(noun_frequencies),
            context=context,
        ))
    return topics


# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

def classify_style(tagged: TaggedText, word_count: int) -> StyleProfile:
    formal = tagged.count("honorific", "pronoun", "conjunction")
    casual = tagged.count("slang", "expression")

    tone = "professional" if formal > casual else "conversational"
    voice = "passive" if tagged.count("passive") > tagged.count("active") else "active"

    if formal > word_count * FORMAL_RATIO:
        formality = "formal"
    elif casual > word_count * CASUAL_RATIO:
        formality = "casual"
    else:
        formality = "neutral"

    return StyleProfile(tone=tone, voice=voice, formality=formality)


def build_suggestions(
    sections: int,
    paragraphs: int,
    key_points: list[str],
    style: StyleProfile,
    readability: str,
) -> list[str]:
    suggestions = []
    if sections < 2 and paragraphs > 3:
        suggestions.append(SUGGEST_SECTIONS)
    if len(key_points) < 2:
        suggestions.append(SUGGEST_KEY_POINTS)
    if style.voice == "passive" and style.formality != "formal":
        suggestions.append(SUGGEST_ACTIVE_VOICE)
    if readability == "complex" and style.formality == "casual":
        suggestions.append(SUGGEST_TONE_MISMATCH)
    return suggestions or [WELL_ORGANIZED]


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class ContentAnalyzer:
    """
    Runs the style/topic analysis on a document.

    Usage::

        result = ContentAnalyzer().analyze(text)
        result.style.tone, result.readability, result.suggestions
    """

    def __init__(
        self,
        tagger: Optional[Tagger] = None,
        config: Optional[ContentConfig] = None,
        tagger_config: Optional[TaggerConfig] = None,
    ):
        self.tagger = tagger or NLTKTagger.from_config(tagger_config)
        self.config = config or ContentConfig()

    def analyze(self, text: str) -> ContentAnalysis:
        """Analyse ``text``.

        Raises:
            InvalidInputError: Empty text, or text without sentences/words.
            AnalysisError: Any other failure while tagging or scoring.
        """
        validate_text(text)

        try:
            tagged = self.tagger.tag(text)
            return self.analyze_tagged(tagged)
        except InvalidInputError:
            raise
        except Exception as e:
            logger.error(f"Content analysis failed: {e}", exc_info=True)
            raise AnalysisError("Failed to analyze text") from e

    def analyze_tagged(self, tagged: TaggedText) -> ContentAnalysis:
        text = tagged.text
        sentences = tagged.sentences
        words = text.split()

        paragraphs = split_paragraphs(text)
        sections = count_sections(paragraphs)

        score = readability_score(words, len(sentences))
        readability = classify_readability(score)

        nouns = tagged.noun_frequencies
        main_theme = nouns[0][0] if nouns else DEFAULT_THEME
        sub_themes = [lemma for lemma, _ in nouns[1:4]]

        key_points = find_key_points(sentences, limit=self.config.max_key_points)
        topics = extract_topics(nouns, sentences, limit=self.config.max_topics)
        style = classify_style(tagged, len(tagged.words))
        suggestions = build_suggestions(
            sections, len(paragraphs), key_points, style, readability,
        )

        logger.info(
            f"Content analysis: {len(paragraphs)} paragraphs, {sections} sections, "
            f"readability {readability} ({score:.1f}), tone {style.tone}"
        )

        return ContentAnalysis(
            paragraphs=len(paragraphs),
            sections=sections,
            readability=readability,
            readability_score=score,
            main_theme=main_theme,
            sub_themes=sub_themes,
            key_points=key_points or [NO_KEY_POINTS],
            style=style,
            topics=topics,
            suggestions=suggestions,
        )


def analyze_content(
    text: str,
    tagger: Optional[Tagger] = None,
    config: Optional[ContentConfig] = None,
) -> ContentAnalysis:
    """Readability, style, topics and suggestions for ``text``."""
    return ContentAnalyzer(tagger=tagger, config=config).analyze(text)
