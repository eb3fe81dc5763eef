"""Exception types raised by the analysis entry points."""

from __future__ import annotations


class LexigraphError(Exception):
    """Base class for all Lexigraph errors."""


class InvalidInputError(LexigraphError, ValueError):
    """The input text cannot be analysed.

    Raised for empty or whitespace-only text, and for text that yields no
    sentences or no words. This is a user-fixable condition.
    """


class AnalysisError(LexigraphError, RuntimeError):
    """An unexpected failure occurred while tagging or scoring the text."""


def validate_text(text: object) -> str:
    """Return ``text`` unchanged, or raise if it cannot be analysed."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError("Invalid input: text is required")
    return text
