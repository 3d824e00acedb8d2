"""
Evaluation Module

Chamorro answer normalization, edit-distance similarity, tiered answer
matching and quiz grading.
"""

from .normalizer import normalize
from .distance import levenshtein
from .similarity import similarity
from .matcher import (
    DEFAULT_SIMILARITY_THRESHOLD,
    MatchTier,
    MatchResult,
    TieredMatcher,
    check_answer,
    evaluate,
    evaluate_choice,
    is_correct,
)
from .grader import QuizGrader, QuizQuestion, QuizType, GradedAnswer

__all__ = [
    "normalize",
    "levenshtein",
    "similarity",
    "DEFAULT_SIMILARITY_THRESHOLD",
    "MatchTier",
    "MatchResult",
    "TieredMatcher",
    "check_answer",
    "evaluate",
    "evaluate_choice",
    "is_correct",
    "QuizGrader",
    "QuizQuestion",
    "QuizType",
    "GradedAnswer",
]
