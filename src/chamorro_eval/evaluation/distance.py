"""Levenshtein edit distance."""

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions needed to turn ``a`` into ``b``.

    Adjacent transpositions are not a single edit: "ab" -> "ba" costs 2.
    """
    return Levenshtein.distance(a, b)
