"""Tests for readability, style classification, topics and suggestions."""

import json

import pytest

from lexigraph.analysis.content import (
    NO_KEY_POINTS,
    SUGGEST_ACTIVE_VOICE,
    SUGGEST_KEY_POINTS,
    SUGGEST_SECTIONS,
    SUGGEST_TONE_MISMATCH,
    WELL_ORGANIZED,
    ContentAnalyzer,
    analyze_content,
    build_suggestions,
    classify_readability,
    classify_style,
    count_sections,
    extract_topics,
    find_key_points,
    readability_score,
    split_paragraphs,
)
from lexigraph.analysis.models import StyleProfile
from lexigraph.errors import AnalysisError, InvalidInputError
from lexigraph.tagging import TaggedText

CATS_TEXT = "Cats are mammals. Cats have fur. However, dogs differ."

DOCUMENT = """Introduction
This guide covers the basics.

Setup Steps:
Install the tool first.

plain closing words."""


def _tagged(tag_counts: dict) -> TaggedText:
    return TaggedText(text="x", sentences=["x"], words=["x"], tag_counts=tag_counts)


class TestStructure:

    def test_paragraphs_split_on_blank_lines(self):
        assert len(split_paragraphs(DOCUMENT)) == 3

    def test_whitespace_only_lines_separate_paragraphs(self):
        assert len(split_paragraphs("one\n   \ntwo")) == 2

    def test_heading_paragraphs_counted(self):
        assert count_sections(split_paragraphs(DOCUMENT)) == 2

    def test_no_headings(self):
        assert count_sections(split_paragraphs(CATS_TEXT)) == 0


class TestReadability:

    def test_single_word(self):
        # 206.835 - 1.015 * 1 - 84.6 * 1
        assert readability_score(["cat"], 1) == pytest.approx(121.22)

    def test_cats_text(self):
        # 9 words, 3 sentences, 15 vowel clusters ("However" has three)
        score = readability_score(CATS_TEXT.split(), 3)
        assert score == pytest.approx(62.79)
        assert classify_readability(score) == "moderate"

    def test_zero_sentences_rejected(self):
        with pytest.raises(InvalidInputError):
            readability_score(["word"], 0)

    def test_zero_words_rejected(self):
        with pytest.raises(InvalidInputError):
            readability_score([], 1)

    def test_thresholds(self):
        assert classify_readability(70.5) == "easy"
        assert classify_readability(70) == "moderate"
        assert classify_readability(50.5) == "moderate"
        assert classify_readability(50) == "complex"
        assert classify_readability(-12) == "complex"


class TestContent:

    def test_key_points_case_sensitive(self):
        sentences = ["This is Important.", "The key idea is speed.", "An essential step."]
        assert find_key_points(sentences) == ["The key idea is speed.", "An essential step."]

    def test_key_points_limited(self):
        sentences = [f"main point {i}" for i in range(5)]
        assert len(find_key_points(sentences)) == 3

    def test_topics(self):
        sentences = CATS_TEXT.split(". ")
        topics = extract_topics([("cat", 2), ("dog", 1)], sentences)
        assert [t.topic for t in topics] == ["cat", "dog"]
        assert topics[0].relevance == pytest.approx(1.0)
        assert topics[1].relevance == pytest.approx(0.5)
        assert topics[1].context == "However, dogs differ."

    def test_topic_without_context(self):
        topics = extract_topics([("zebra", 1)], ["No match here."])
        assert topics[0].context == ""

    def test_topics_limited(self):
        nouns = [(f"n{i}", 1) for i in range(9)]
        assert len(extract_topics(nouns, [])) == 5


class TestStyle:

    def test_formal_professional_passive(self):
        style = classify_style(
            _tagged({"pronoun": 3, "conjunction": 2, "passive": 2, "active": 1}),
            word_count=20,
        )
        assert style == StyleProfile(tone="professional", voice="passive", formality="formal")

    def test_casual_conversational(self):
        style = classify_style(
            _tagged({"slang": 3, "honorific": 1, "active": 4}),
            word_count=20,
        )
        assert style == StyleProfile(tone="conversational", voice="active", formality="casual")

    def test_neutral_when_no_tags(self):
        style = classify_style(_tagged({}), word_count=20)
        assert style == StyleProfile(tone="conversational", voice="active", formality="neutral")

    def test_equal_voice_counts_are_active(self):
        style = classify_style(_tagged({"passive": 2, "active": 2}), word_count=10)
        assert style.voice == "active"

    def test_formality_uses_tagger_word_count(self, make_tagger):
        # five whitespace chunks, but the tagger saw ten word tokens
        text = "Dr.Smith,Jones;Lee and-I reviewed it/them. Done."
        tagged = TaggedText(
            text=text,
            sentences=["Dr.Smith,Jones;Lee and-I reviewed it/them.", "Done."],
            words=["Dr", "Smith", "Jones", "Lee", "and", "I", "reviewed", "it",
                   "them", "Done"],
            tag_counts={"honorific": 1, "pronoun": 1},
        )
        result = ContentAnalyzer(tagger=make_tagger()).analyze_tagged(tagged)
        assert result.style.formality == "neutral"


class TestSuggestions:

    def test_all_rules_fire_in_order(self):
        style = StyleProfile(tone="conversational", voice="passive", formality="casual")
        assert build_suggestions(0, 5, [], style, "complex") == [
            SUGGEST_SECTIONS,
            SUGGEST_KEY_POINTS,
            SUGGEST_ACTIVE_VOICE,
            SUGGEST_TONE_MISMATCH,
        ]

    def test_placeholder_when_no_rule_fires(self):
        style = StyleProfile(tone="professional", voice="active", formality="formal")
        assert build_suggestions(3, 5, ["a", "b"], style, "easy") == [WELL_ORGANIZED]

    def test_formal_passive_text_not_flagged(self):
        style = StyleProfile(tone="professional", voice="passive", formality="formal")
        assert SUGGEST_ACTIVE_VOICE not in build_suggestions(3, 1, ["a", "b"], style, "easy")


class TestAnalyzeContent:

    def test_cats_scenario(self, cats_tagger):
        result = analyze_content(CATS_TEXT, tagger=cats_tagger)

        assert result.paragraphs == 1
        assert result.sections == 0
        assert result.readability == "moderate"
        assert result.main_theme == "cat"
        assert result.sub_themes == ["mammal", "fur", "dog"]
        assert result.key_points == [NO_KEY_POINTS]
        assert result.style == StyleProfile("conversational", "active", "neutral")
        assert [t.topic for t in result.topics] == ["cat", "mammal", "fur", "dog"]
        assert result.topics[0].relevance == pytest.approx(0.5)
        assert result.topics[0].context == "Cats are mammals."
        assert result.suggestions == [SUGGEST_KEY_POINTS]

    def test_output_shape(self, cats_tagger):
        data = analyze_content(CATS_TEXT, tagger=cats_tagger).to_dict()
        assert set(data) == {"structure", "content", "style", "topics", "suggestions"}
        assert set(data["structure"]) == {"paragraphs", "sections", "readability"}
        assert set(data["content"]) == {"mainTheme", "subThemes", "keyPoints"}
        assert set(data["style"]) == {"tone", "voice", "formality"}
        assert set(data["topics"][0]) == {"topic", "relevance", "context"}

    def test_default_theme_without_nouns(self, make_tagger):
        result = analyze_content("Run fast.", tagger=make_tagger())
        assert result.main_theme == "General Content"
        assert result.topics == []
        assert result.suggestions

    def test_repeat_runs_identical(self, cats_tagger):
        first = json.dumps(analyze_content(CATS_TEXT, tagger=cats_tagger).to_dict())
        second = json.dumps(analyze_content(CATS_TEXT, tagger=cats_tagger).to_dict())
        assert first == second

    @pytest.mark.parametrize("text", ["", "  \n  "])
    def test_empty_input_rejected(self, text, cats_tagger):
        with pytest.raises(InvalidInputError):
            analyze_content(text, tagger=cats_tagger)

    def test_no_sentences_rejected(self, make_tagger):
        with pytest.raises(InvalidInputError):
            analyze_content("???", tagger=make_tagger(sentences=[]))

    def test_internal_failure_wrapped(self, broken_tagger):
        with pytest.raises(AnalysisError):
            ContentAnalyzer(tagger=broken_tagger).analyze(CATS_TEXT)
