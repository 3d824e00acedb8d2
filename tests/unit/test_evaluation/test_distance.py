"""
Tests for Levenshtein edit distance.
"""

import pytest

from rapidfuzz.distance import Levenshtein

from chamorro_eval.evaluation.distance import levenshtein


class TestLevenshtein:
    """Test cases for levenshtein()."""

    @pytest.mark.parametrize("a,b,expected", [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("dies", "dies", 0),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("guiha", "guihan", 1),
        ("siete", "siette", 1),
        ("tres", "dos", 3),
    ])
    def test_known_distances(self, a, b, expected):
        """Test distances for known pairs."""
        assert levenshtein(a, b) == expected

    def test_transposition_costs_two(self):
        """Test that swapping adjacent characters is two edits."""
        assert levenshtein("ab", "ba") == 2
        assert levenshtein("hafa", "ahfa") == 2

    def test_counts_code_points(self):
        """Test that non-ASCII characters count as single characters."""
        assert levenshtein("å", "a") == 1
        assert levenshtein("håfa", "hafa") == 1

    @pytest.mark.parametrize("a,b", [
        ("kitten", "sitting"),
        ("", "dies"),
        ("a", "abcdef"),
    ])
    def test_symmetric(self, a, b):
        """Test that argument order doesn't matter."""
        assert levenshtein(a, b) == levenshtein(b, a)

    @pytest.mark.parametrize("a,b", [
        ("guiha", "guihan"),
        ("håfa", "hafa"),
        ("ab", "ba"),
        ("", "dies"),
    ])
    def test_agrees_with_normalized_similarity(self, a, b):
        """Test the distance against rapidfuzz's own length-normalized score."""
        expected = Levenshtein.normalized_similarity(a, b)
        longest = max(len(a), len(b))
        assert 1 - levenshtein(a, b) / longest == pytest.approx(expected)
