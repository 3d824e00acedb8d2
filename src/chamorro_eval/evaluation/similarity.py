"""
Similarity Scoring

Length-relative similarity between two answers, computed on their
normalized forms.
"""

from .distance import levenshtein
from .normalizer import normalize


def similarity(a: str, b: str) -> float:
    """
    Similarity between two raw strings, from 0.0 (completely different)
    to 1.0 (identical after normalization).

    Args:
        a: First string
        b: Second string

    Returns:
        ``1 - distance / longer_length`` on the normalized forms
    """
    return canonical_similarity(normalize(a), normalize(b))


def canonical_similarity(a: str, b: str) -> float:
    """Similarity between two strings that are already normalized."""
    # Also covers two empty strings
    if a == b:
        return 1.0

    distance = levenshtein(a, b)
    score = 1.0 - distance / max(len(a), len(b))

    return max(0.0, min(1.0, score))
