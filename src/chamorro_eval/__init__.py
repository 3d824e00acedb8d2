"""
chamorro-eval

Answer evaluation for Chamorro language quizzes: diacritic- and
glottal-stop-insensitive normalization with typo-tolerant matching.
"""

from .evaluation import (
    DEFAULT_SIMILARITY_THRESHOLD,
    GradedAnswer,
    MatchResult,
    MatchTier,
    QuizGrader,
    QuizQuestion,
    QuizType,
    TieredMatcher,
    check_answer,
    evaluate,
    evaluate_choice,
    is_correct,
    levenshtein,
    normalize,
    similarity,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "GradedAnswer",
    "MatchResult",
    "MatchTier",
    "QuizGrader",
    "QuizQuestion",
    "QuizType",
    "TieredMatcher",
    "check_answer",
    "evaluate",
    "evaluate_choice",
    "is_correct",
    "levenshtein",
    "normalize",
    "similarity",
]
