"""
Result Models
=============

Dataclasses returned by the analysis entry points. Attribute names are
snake_case; ``to_dict()`` produces the camelCase JSON shape consumed by
renderers:

    SemanticAnalysis.to_dict()
        {structure: {complexity, flow, coherence},
         semantics: {mainConcepts, relationships, hierarchy},
         insights:  {keyTakeaways, gaps, strengths}}

    ContentAnalysis.to_dict()
        {structure: {paragraphs, sections, readability},
         content:   {mainTheme, subThemes, keyPoints},
         style:     {tone, voice, formality},
         topics:    [{topic, relevance, context}],
         suggestions: [...]}

    TextStatistics.to_dict()
        {wordCount, charCount, sentenceCount, readingTime, topWords}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

RelationType = Literal["supports", "contrasts", "elaborates"]


# ---------------------------------------------------------------------------
# Semantic analysis
# ---------------------------------------------------------------------------

@dataclass
class Concept:
    """A salient lemma selected as a node of the concept graph.

    Attributes:
        name: Lowercased lemma.
        frequency: Occurrences of the lemma across the document.
        relevance: ``frequency`` divided by the summed frequency of all
            selected concepts.
    """
    name: str
    frequency: int
    relevance: Optional[float] = None


@dataclass
class Relationship:
    """A directed co-occurrence edge between two concepts in one sentence."""
    source: str
    target: str
    type: RelationType

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "type": self.type}


@dataclass
class HierarchyNode:
    """A concept with its depth level and direct successors."""
    concept: str
    level: int
    children: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"concept": self.concept, "level": self.level, "children": list(self.children)}


@dataclass
class StructureProfile:
    complexity: Literal["basic", "intermediate", "advanced"]
    flow: Literal["linear", "branching", "circular"]
    coherence: float

    def to_dict(self) -> dict:
        return {"complexity": self.complexity, "flow": self.flow, "coherence": self.coherence}


@dataclass
class Insights:
    """Narrative takeaways, gaps and strengths. No list is ever empty."""
    key_takeaways: list[str]
    gaps: list[str]
    strengths: list[str]

    def to_dict(self) -> dict:
        return {
            "keyTakeaways": list(self.key_takeaways),
            "gaps": list(self.gaps),
            "strengths": list(self.strengths),
        }


@dataclass
class SemanticAnalysis:
    """Full result of :func:`~lexigraph.analysis.semantic.analyze_semantics`."""
    structure: StructureProfile
    concepts: list[Concept]
    relationships: list[Relationship]
    hierarchy: list[HierarchyNode]
    insights: Insights

    @property
    def main_concepts(self) -> list[str]:
        return [c.name for c in self.concepts]

    def to_dict(self) -> dict:
        return {
            "structure": self.structure.to_dict(),
            "semantics": {
                "mainConcepts": self.main_concepts,
                "relationships": [r.to_dict() for r in self.relationships],
                "hierarchy": [h.to_dict() for h in self.hierarchy],
            },
            "insights": self.insights.to_dict(),
        }


# ---------------------------------------------------------------------------
# Style / topic analysis
# ---------------------------------------------------------------------------

@dataclass
class Topic:
    topic: str
    relevance: float
    context: str

    def to_dict(self) -> dict:
        return {"topic": self.topic, "relevance": self.relevance, "context": self.context}


@dataclass
class StyleProfile:
    tone: Literal["professional", "conversational"]
    voice: Literal["active", "passive"]
    formality: Literal["formal", "neutral", "casual"]

    def to_dict(self) -> dict:
        return {"tone": self.tone, "voice": self.voice, "formality": self.formality}


@dataclass
class ContentAnalysis:
    """Full result of :func:`~lexigraph.analysis.content.analyze_content`.

    Attributes:
        readability_score: Raw reading-ease score behind ``readability``.
            Not part of the serialized shape.
    """
    paragraphs: int
    sections: int
    readability: Literal["easy", "moderate", "complex"]
    readability_score: float
    main_theme: str
    sub_themes: list[str]
    key_points: list[str]
    style: StyleProfile
    topics: list[Topic]
    suggestions: list[str]

    def to_dict(self) -> dict:
        return {
            "structure": {
                "paragraphs": self.paragraphs,
                "sections": self.sections,
                "readability": self.readability,
            },
            "content": {
                "mainTheme": self.main_theme,
                "subThemes": list(self.sub_themes),
                "keyPoints": list(self.key_points),
            },
            "style": self.style.to_dict(),
            "topics": [t.to_dict() for t in self.topics],
            "suggestions": list(self.suggestions),
        }


# ---------------------------------------------------------------------------
# Plain text statistics
# ---------------------------------------------------------------------------

@dataclass
class TextStatistics:
    word_count: int
    char_count: int
    sentence_count: int
    reading_time: int  # minutes
    top_words: list[tuple[str, int]]

    def to_dict(self) -> dict:
        return {
            "wordCount": self.word_count,
            "charCount": self.char_count,
            "sentenceCount": self.sentence_count,
            "readingTime": self.reading_time,
            "topWords": [{"word": w, "count": c} for w, c in self.top_words],
        }
