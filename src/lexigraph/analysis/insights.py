"""
Insight Generation
==================

Turns concept connectivity into short, human-readable notes.

    Key takeaways
        One representative sentence for each of the top concepts: the first
        sentence that mentions it.

    Gaps
        Concepts touched by fewer than two relationship endpoints. They are
        mentioned but barely connected to the rest of the argument.

    Strengths
        Concepts touched by more than two endpoints, i.e. developed across
        several sentences or alongside several other concepts.

A concept with exactly two endpoints is neither a gap nor a strength.
Concepts that never appear in any relationship are not tallied at all.
Every list falls back to a placeholder so renderers never get an empty list.
"""

from __future__ import annotations

import logging

from .models import Concept, Insights, Relationship

logger = logging.getLogger(__name__)

NO_TAKEAWAYS = "No clear takeaways identified"
NO_GAPS = "No significant gaps identified"
NO_STRENGTHS = "Content structure appears balanced"

GAP_MAX_CONNECTIONS = 2  # exclusive
STRENGTH_MIN_CONNECTIONS = 2  # exclusive


def find_takeaways(
    sentences: list[str],
    concepts: list[Concept],
    limit: int = 3,
) -> list[str]:
    """First sentence mentioning each of the top ``limit`` concepts.

    Concepts with no matching sentence are skipped, and two concepts may
    share the same representative sentence.
    """
    takeaways = []
    for concept in concepts[:limit]:
        for sentence in sentences:
            if concept.name in sentence.lower():
                takeaways.append(sentence)
                break
    return takeaways


def count_connections(relationships: list[Relationship]) -> dict[str, int]:
    """Number of edge endpoints per concept, in order of first appearance."""
    connections: dict[str, int] = {}
    for rel in relationships:
        connections[rel.source] = connections.get(rel.source, 0) + 1
        connections[rel.target] = connections.get(rel.target, 0) + 1
    return connections


def generate_insights(
    sentences: list[str],
    concepts: list[Concept],
    relationships: list[Relationship],
    takeaway_count: int = 3,
) -> Insights:
    takeaways = find_takeaways(sentences, concepts, limit=takeaway_count)
    connections = count_connections(relationships)

    gaps = [
        f'Limited exploration of "{concept}" and its relationships'
        for concept, count in connections.items()
        if count < GAP_MAX_CONNECTIONS
    ]
    strengths = [
        f'Strong development of "{concept}" throughout the content'
        for concept, count in connections.items()
        if count > STRENGTH_MIN_CONNECTIONS
    ]

    logger.debug(
        f"Insights: {len(takeaways)} takeaways, {len(gaps)} gaps, "
        f"{len(strengths)} strengths"
    )

    return Insights(
        key_takeaways=takeaways or [NO_TAKEAWAYS],
        gaps=gaps or [NO_GAPS],
        strengths=strengths or [NO_STRENGTHS],
    )
