"""
Tests for similarity scoring.
"""

from itertools import product

import pytest

from chamorro_eval.evaluation.similarity import similarity, canonical_similarity


SAMPLE_TEXTS = ["", "'", "dies", "DIES", "håfa", "hafa", "guiha", "guihan", "banana", "Si Yu'os Ma'åse'"]


class TestSimilarity:
    """Test cases for similarity()."""

    def test_identical_after_normalization(self):
        """Test that strings equal after normalization score exactly 1."""
        assert similarity("håfa", "hafa") == 1.0
        assert similarity("na'ån", "naan") == 1.0

    def test_both_empty(self):
        """Test that two empty strings are maximally similar."""
        assert similarity("", "") == 1.0
        assert similarity("'", "") == 1.0
        assert canonical_similarity("", "") == 1.0

    def test_one_edit(self):
        """Test the one-deletion case."""
        assert similarity("guiha", "guihan") == pytest.approx(1 - 1 / 6)

    def test_empty_against_word(self):
        """Test that an empty answer scores zero against a word."""
        assert similarity("", "dies") == 0.0

    def test_unrelated(self):
        """Test that unrelated words score low."""
        assert similarity("banana", "dies") < 0.5
        assert similarity("abc", "xyz") == 0.0

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_self_similarity(self, text):
        """Test that every string is maximally similar to itself."""
        assert similarity(text, text) == 1.0

    @pytest.mark.parametrize("a,b", list(product(SAMPLE_TEXTS, repeat=2)))
    def test_symmetric_and_bounded(self, a, b):
        """Test symmetry and the [0, 1] range."""
        score = similarity(a, b)
        assert score == similarity(b, a)
        assert 0.0 <= score <= 1.0
