"""
Analysis Package
================

Heuristic text analysis and visualization.

This package provides three analysis entry points and a plotting class:

    analyze_semantics / SemanticAnalyzer
        Structure scores (complexity, flow, coherence), the concept graph
        (main concepts, typed relationships, leveled hierarchy) and
        narrative insights (takeaways, gaps, strengths).

    analyze_content / ContentAnalyzer
        Paragraph and section structure, readability, main theme, key
        points, topics with context, tone/voice/formality and writing
        suggestions.

    compute_statistics
        Word, character and sentence counts, reading time and top words.

    Visualizer
        Concept maps, topic charts and word-frequency charts saved to an
        output directory.

Usage::

    from lexigraph.analysis import analyze_semantics, analyze_content

    semantic = analyze_semantics(text)
    content = analyze_content(text)
    json.dumps(semantic.to_dict())
"""

from .content import ContentAnalyzer, analyze_content
from .semantic import SemanticAnalyzer, analyze_semantics
from .stats import compute_statistics
from .visualization import Visualizer

__all__ = [
    "ContentAnalyzer",
    "SemanticAnalyzer",
    "Visualizer",
    "analyze_content",
    "analyze_semantics",
    "compute_statistics",
]
