"""
Lexigraph
=========

Heuristic semantic analysis of free-form text. Lexigraph turns a flat
token/sentence stream into a weighted concept graph, a leveled concept
hierarchy, readability and style classifications, and short narrative
insights, using only lexical rules layered over a tokenizer/POS-tagger.

There is no learned model anywhere in the package: every score is a
deterministic function of the input text, so analysing the same text twice
yields identical results.
"""

__version__ = "0.1.0"
