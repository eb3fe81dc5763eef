"""
Semantic Analysis
=================

Builds a small concept graph out of a document using nothing but lexical
heuristics over the tagger's output.

Stages
------
    extract_concepts
        Merges the noun and verb lemma rankings, keeps the most frequent
        lemmas (five by default) and deduplicates them. Nouns are listed
        before verbs, so a noun wins a tie with a verb of equal count.

    find_relationships
        For every sentence and every pair of concepts (i < j in concept
        order) that both occur in the sentence, emits one directed edge
        ``concepts[i] -> concepts[j]``. Edges are never deduplicated: two
        sentences mentioning the same pair produce two edges. Matching is
        a plain lowercase substring test, so "cat" also matches "cats" and
        "category".

    determine_relation_type
        Types an edge by the discourse markers of its sentence. Contrast
        markers are checked before support markers, so "but ... because"
        is a contrast.

    build_hierarchy
        Levels every concept by the length of the longest outgoing chain,
        computed with :func:`concept_level`.

Hierarchy levels
----------------
:func:`concept_level` walks outgoing edges recursively and threads ONE
mutable ``visited`` set through the entire walk of a top-level concept,
shared between sibling branches. A node already seen anywhere in the
walk counts as level 0. This is an approximation: on graphs where two
branches reach the same node, or on cycles, the result depends on the
order children are visited, and it is not a true longest path. Renderers
size nodes by this exact value, so it is kept as is.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import SemanticConfig, TaggerConfig
from ..errors import AnalysisError, InvalidInputError, validate_text
from ..tagging import NLTKTagger, Tagger, TaggedText
from .insights import generate_insights
from .models import (
    Concept,
    HierarchyNode,
    RelationType,
    Relationship,
    SemanticAnalysis,
    StructureProfile,
)
from .structure import calculate_complexity, determine_flow, measure_coherence

logger = logging.getLogger(__name__)

CONTRAST_MARKERS: tuple[str, ...] = ("but", "however", "although")
SUPPORT_MARKERS: tuple[str, ...] = ("because", "therefore", "thus")


# ---------------------------------------------------------------------------
# Concepts
# ---------------------------------------------------------------------------

def extract_concepts(
    noun_frequencies: list[tuple[str, int]],
    verb_frequencies: list[tuple[str, int]],
    limit: int = 5,
) -> list[Concept]:
    """Select the most frequent noun/verb lemmas as concepts.

    The top ``limit`` entries are taken BEFORE deduplication, so a lemma
    ranked as both noun and verb can leave fewer than ``limit`` concepts.
    """
    merged = list(noun_frequencies) + list(verb_frequencies)
    ranked = sorted(merged, key=lambda item: -item[1])[:limit]

    concepts: list[Concept] = []
    seen: set[str] = set()
    for lemma, count in ranked:
        if lemma in seen:
            continue
        seen.add(lemma)
        concepts.append(Concept(name=lemma, frequency=count))

    total = sum(c.frequency for c in concepts)
    for concept in concepts:
        concept.relevance = concept.frequency / total if total else 0.0

    return concepts


# ---------------------------------------------------------------------------
# Relationships
# ---------------------------------------------------------------------------

def determine_relation_type(sentence: str) -> RelationType:
    lower = sentence.lower()
    if any(marker in lower for marker in CONTRAST_MARKERS):
        return "contrasts"
    if any(marker in lower for marker in SUPPORT_MARKERS):
        return "supports"
    return "elaborates"


def find_relationships(sentences: list[str], concepts: list[Concept]) -> list[Relationship]:
    relationships = []
    names = [c.name for c in concepts]

    for sentence in sentences:
        lower = sentence.lower()
        for i in range(len(names)):
            for j in range(i + 1, len(names)):
                if names[i] in lower and names[j] in lower:
                    relationships.append(Relationship(
                        source=names[i],
                        target=names[j],
                        type=determine_relation_type(sentence),
                    ))

    return relationships


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------

def build_adjacency(relationships: list[Relationship]) -> dict[str, dict[str, None]]:
    """Map each source concept to its distinct targets, in first-seen order.

    A dict with ``None`` values is used as an insertion-ordered set.
    """
    edges: dict[str, dict[str, None]] = {}
    for rel in relationships:
        edges.setdefault(rel.source, {})[rel.target] = None
    return edges


def concept_level(
    concept: str,
    edges: dict[str, dict[str, None]],
    visited: Optional[set[str]] = None,
) -> int:
    """Depth of ``concept`` measured along outgoing edges.

    ``visited`` is shared by reference across the whole recursion,
    including sibling branches. See the module docstring.
    """
    if visited is None:
        visited = set()
    if concept in visited:
        return 0
    visited.add(concept)

    children = edges.get(concept)
    if not children:
        return 0

    return 1 + max(concept_level(child, edges, visited) for child in children)


def build_hierarchy(
    concepts: list[Concept],
    relationships: list[Relationship],
) -> list[HierarchyNode]:
    edges = build_adjacency(relationships)

    hierarchy = [
        HierarchyNode(
            concept=c.name,
            level=concept_level(c.name, edges),
            children=list(edges.get(c.name, {})),
        )
        for c in concepts
    ]
    return sorted(hierarchy, key=lambda node: node.level)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

class SemanticAnalyzer:
    """
    Runs the full semantic pipeline on a document.

    The analyzer keeps only its tagger and configuration; every call to
    :meth:`analyze` starts from scratch.

    Usage::

        analyzer = SemanticAnalyzer()
        result = analyzer.analyze(text)
        result.to_dict()["semantics"]["hierarchy"]
    """

    def __init__(
        self,
        tagger: Optional[Tagger] = None,
        config: Optional[SemanticConfig] = None,
        tagger_config: Optional[TaggerConfig] = None,
    ):
        self.tagger = tagger or NLTKTagger.from_config(tagger_config)
        self.config = config or SemanticConfig()

    def analyze(self, text: str) -> SemanticAnalysis:
        """Analyse ``text``.

        Raises:
            InvalidInputError: Empty text, or text without sentences.
            AnalysisError: Any other failure while tagging or scoring.
        """
        validate_text(text)

        try:
            tagged = self.tagger.tag(text)
            return self.analyze_tagged(tagged)
        except InvalidInputError:
            raise
        except Exception as e:
            logger.error(f"Semantic analysis failed: {e}", exc_info=True)
            raise AnalysisError("Failed to analyze text") from e

    def analyze_tagged(self, tagged: TaggedText) -> SemanticAnalysis:
        sentences = tagged.sentences
        if not sentences:
            raise InvalidInputError("Invalid input: text contains no sentences")

        structure = StructureProfile(
            complexity=calculate_complexity(sentences),
            flow=determine_flow(sentences),
            coherence=measure_coherence(sentences),
        )

        concepts = extract_concepts(
            tagged.noun_frequencies,
            tagged.verb_frequencies,
            limit=self.config.max_concepts,
        )
        relationships = find_relationships(sentences, concepts)
        hierarchy = build_hierarchy(concepts, relationships)
        insights = generate_insights(
            sentences, concepts, relationships,
            takeaway_count=self.config.takeaway_count,
        )

        logger.info(
            f"Semantic analysis: {len(sentences)} sentences, "
            f"{len(concepts)} concepts, {len(relationships)} relationships"
        )

        return SemanticAnalysis(
            structure=structure,
            concepts=concepts,
            relationships=relationships,
            hierarchy=hierarchy,
            insights=insights,
        )


def analyze_semantics(
    text: str,
    tagger: Optional[Tagger] = None,
    config: Optional[SemanticConfig] = None,
) -> SemanticAnalysis:
    """Concept graph, structure scores and insights for ``text``."""
    return SemanticAnalyzer(tagger=tagger, config=config).analyze(text)
