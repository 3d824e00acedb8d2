"""
Answer Matching System

Tiered matching of a free-text answer against a primary reference answer and
its acceptable alternates. Each tier is tried against every candidate before
falling through to the next, weaker tier:

    exact       case- and edge-whitespace-insensitive, diacritic-sensitive
    normalized  equal after Chamorro normalization
    fuzzy       normalized similarity at or above the threshold
    none        nothing matched
"""

from typing import Dict, List, Optional, Sequence, Any
from dataclasses import dataclass, field
from enum import Enum

from fuzzywuzzy import fuzz

from .normalizer import normalize, fold_case
from .similarity import canonical_similarity
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 0.8


class MatchTier(str, Enum):
    """How strongly an answer matched, from strongest to weakest."""
    EXACT = "exact"
    NORMALIZED = "normalized"
    FUZZY = "fuzzy"
    NONE = "none"

    @property
    def strength(self) -> int:
        """Rank of the tier, higher is stronger."""
        return _TIER_STRENGTH[self]

    @property
    def is_match(self) -> bool:
        return self is not MatchTier.NONE


_TIER_STRENGTH = {
    MatchTier.EXACT: 3,
    MatchTier.NORMALIZED: 2,
    MatchTier.FUZZY: 1,
    MatchTier.NONE: 0,
}


@dataclass
class MatchResult:
    """Result of answer matching."""
    is_correct: bool
    match_type: MatchTier
    confidence: float
    matched_answer: Optional[str]
    normalized_answer: str
    details: Dict[str, Any] = field(default_factory=dict)


class TieredMatcher:
    """Matches answers against reference answers using the tiered policy."""

    def __init__(self, threshold: float = DEFAULT_SIMILARITY_THRESHOLD):
        """
        Initialize the matcher.

        Args:
            threshold: Minimum similarity for a fuzzy match. Not validated;
                values <= 0 accept anything at the fuzzy tier and values > 1
                make the fuzzy tier unreachable.
        """
        self.threshold = threshold

    def match_answer(self, answer: str, expected: str,
                     acceptable: Optional[Sequence[str]] = None) -> MatchResult:
        """
        Match a typed answer against the expected answer and its alternates.

        Args:
            answer: What the user typed
            expected: The primary correct answer
            acceptable: Alternative correct answers

        Returns:
            MatchResult for the strongest tier reached
        """
        candidates = [expected] + list(acceptable or [])

        folded_answer = fold_case(answer)
        for index, candidate in enumerate(candidates):
            if folded_answer == fold_case(candidate):
                return self._build_result(MatchTier.EXACT, 1.0, candidates, index,
                                          normalize(answer))

        norm_answer = normalize(answer)
        norm_candidates = [normalize(candidate) for candidate in candidates]
        for index, norm_candidate in enumerate(norm_candidates):
            if norm_answer == norm_candidate:
                return self._build_result(MatchTier.NORMALIZED, 1.0, candidates, index,
                                          norm_answer)

        scores: List[float] = []
        for index, norm_candidate in enumerate(norm_candidates):
            score = canonical_similarity(norm_answer, norm_candidate)
            scores.append(score)
            if score >= self.threshold:
                return self._build_result(
                    MatchTier.FUZZY, score, candidates, index, norm_answer,
                    similarities=scores,
                    ratio=fuzz.ratio(norm_answer, norm_candidate) / 100.0,
                )

        best_index = max(range(len(scores)), key=scores.__getitem__)
        return self._build_result(
            MatchTier.NONE, scores[best_index], candidates, None, norm_answer,
            similarities=scores,
            closest_index=best_index,
            ratio=fuzz.ratio(norm_answer, norm_candidates[best_index]) / 100.0,
        )

    def match_choice(self, selected: str, correct: str,
                     acceptable: Optional[Sequence[str]] = None,
                     case_sensitive: bool = False) -> MatchResult:
        """
        Match a selected multiple-choice option.

        Only the exact tier applies. Options that merely look alike must not
        be conflated, so there is no normalized or fuzzy fallback.

        Args:
            selected: The option the user picked
            correct: The correct option
            acceptable: Other options that also count as correct
            case_sensitive: Compare option strings verbatim

        Returns:
            MatchResult that is either exact or none
        """
        candidates = [correct] + list(acceptable or [])

        if case_sensitive:
            key = selected
            matches = [candidate == key for candidate in candidates]
        else:
            key = fold_case(selected)
            matches = [fold_case(candidate) == key for candidate in candidates]

        if any(matches):
            index = matches.index(True)
            return self._build_result(MatchTier.EXACT, 1.0, candidates, index, key,
                                      multiple_choice=True)

        return self._build_result(MatchTier.NONE, 0.0, candidates, None, key,
                                  multiple_choice=True)

    def batch_match(self, answers: List[str], expected: List[str],
                    multiple_acceptable: Optional[List[Sequence[str]]] = None) -> List[MatchResult]:
        """Match multiple answers in batch."""
        if len(answers) != len(expected):
            raise ValueError("Answers and expected lists must have the same length")
        if multiple_acceptable is not None and len(multiple_acceptable) != len(answers):
            raise ValueError("Acceptable answer lists must match the number of answers")

        results = []
        for i, (answer, expect) in enumerate(zip(answers, expected)):
            acceptable = multiple_acceptable[i] if multiple_acceptable else None
            results.append(self.match_answer(answer, expect, acceptable))

        return results

    def _build_result(self, tier: MatchTier, confidence: float, candidates: List[str],
                      index: Optional[int], normalized_answer: str,
                      **details: Any) -> MatchResult:
        details['tier'] = tier.value
        details['candidate_index'] = index
        details['candidates_checked'] = len(candidates)
        if tier is MatchTier.FUZZY or tier is MatchTier.NONE:
            details['threshold'] = self.threshold

        logger.debug(f"Answer matched at tier '{tier.value}' "
                     f"(candidate={index}, confidence={confidence:.3f})")

        return MatchResult(
            is_correct=tier.is_match,
            match_type=tier,
            confidence=confidence,
            matched_answer=candidates[index] if index is not None else None,
            normalized_answer=normalized_answer,
            details=details,
        )


def check_answer(user_answer: str, primary: str,
                 alternates: Optional[Sequence[str]] = None,
                 threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> MatchResult:
    """Evaluate a typed answer and return the full match result."""
    return TieredMatcher(threshold).match_answer(user_answer, primary, alternates)


def evaluate(user_answer: str, primary: str,
             alternates: Optional[Sequence[str]] = None,
             threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> MatchTier:
    """
    Classify a typed answer against the primary answer and its alternates.

    Args:
        user_answer: Raw keyboard input
        primary: The primary correct answer
        alternates: Acceptable alternate answers
        threshold: Minimum similarity for a fuzzy match (default 0.8)

    Returns:
        The strongest MatchTier reached
    """
    return check_answer(user_answer, primary, alternates, threshold).match_type


def is_correct(user_answer: str, primary: str,
               alternates: Optional[Sequence[str]] = None,
               threshold: float = DEFAULT_SIMILARITY_THRESHOLD) -> bool:
    """Pass/fail form of :func:`evaluate`."""
    return evaluate(user_answer, primary, alternates, threshold).is_match


def evaluate_choice(selected: str, correct: str,
                    alternates: Optional[Sequence[str]] = None) -> MatchTier:
    """Exact-tier-only evaluation for fixed-option questions."""
    return TieredMatcher().match_choice(selected, correct, alternates).match_type
