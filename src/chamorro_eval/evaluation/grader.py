"""
Quiz Answer Grading

Grades answers to quiz questions, choosing the matching policy from the
question type, and keeps running statistics for a quiz session.
"""

import math
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime

from .matcher import TieredMatcher, MatchResult, MatchTier
from ..core.config import get_config
from ..core.exceptions import ValidationError
from ..utils.logging import get_logger, get_quiz_logger, PerformanceTimer

logger = get_logger(__name__)


class QuizType(str, Enum):
    """Quiz question types."""
    MULTIPLE_CHOICE = "multiple_choice"
    TYPE_ANSWER = "type_answer"
    FILL_BLANK = "fill_blank"


@dataclass
class QuizQuestion:
    """A single authored quiz question."""
    id: str
    type: QuizType
    question: str
    correct_answer: str
    options: List[str] = field(default_factory=list)
    acceptable_answers: List[str] = field(default_factory=list)
    hint: Optional[str] = None
    explanation: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuizQuestion":
        """
        Build a question from content data.

        Accepts snake_case keys as well as the camelCase keys used by the
        quiz content tables (``correctAnswer``, ``acceptableAnswers``).

        Raises:
            ValidationError: If a required field is missing or the type is unknown
        """
        question_id = data.get('id')
        if not question_id:
            raise ValidationError("Quiz question is missing an id", field_name='id')

        correct_answer = data.get('correct_answer', data.get('correctAnswer'))
        if correct_answer is None:
            raise ValidationError(
                f"Quiz question {question_id} has no correct answer",
                field_name='correct_answer',
                question_id=question_id,
            )

        raw_type = data.get('type', QuizType.TYPE_ANSWER.value)
        try:
            quiz_type = QuizType(raw_type)
        except ValueError:
            raise ValidationError(
                f"Unknown quiz type for question {question_id}: {raw_type}",
                field_name='type',
                invalid_value=raw_type,
            )

        acceptable = data.get('acceptable_answers', data.get('acceptableAnswers')) or []

        return cls(
            id=str(question_id),
            type=quiz_type,
            question=data.get('question', ''),
            correct_answer=correct_answer,
            options=list(data.get('options') or []),
            acceptable_answers=list(acceptable),
            hint=data.get('hint'),
            explanation=data.get('explanation'),
        )


@dataclass
class GradedAnswer:
    """Result of grading one answer."""
    question_id: str
    quiz_type: QuizType
    answer: str
    is_correct: bool
    match_result: MatchResult
    feedback: str
    timestamp: datetime


class QuizGrader:
    """Grades quiz answers and tracks session statistics."""

    def __init__(self, threshold: Optional[float] = None,
                 multiple_choice_case_sensitive: Optional[bool] = None):
        """
        Initialize the grader.

        Args:
            threshold: Fuzzy similarity threshold (configuration default if None)
            multiple_choice_case_sensitive: Compare options verbatim
                (configuration default if None)
        """
        evaluation_config = get_config().evaluation
        if threshold is None:
            threshold = evaluation_config.similarity_threshold
        if multiple_choice_case_sensitive is None:
            multiple_choice_case_sensitive = evaluation_config.multiple_choice_case_sensitive

        self.matcher = TieredMatcher(threshold)
        self.multiple_choice_case_sensitive = multiple_choice_case_sensitive
        self.reset_statistics()

    @property
    def threshold(self) -> float:
        return self.matcher.threshold

    def grade(self, question: QuizQuestion, answer: str) -> GradedAnswer:
        """
        Grade a single answer.

        Multiple-choice questions are compared at the exact tier only; typed
        and fill-in-the-blank answers go through the full tiered policy.
        """
        quiz_logger = get_quiz_logger(question.id, question.type.value)

        if question.type is QuizType.MULTIPLE_CHOICE:
            match_result = self.matcher.match_choice(
                answer, question.correct_answer, question.acceptable_answers,
                case_sensitive=self.multiple_choice_case_sensitive,
            )
        else:
            match_result = self.matcher.match_answer(
                answer, question.correct_answer, question.acceptable_answers
            )

        quiz_logger.debug(f"Graded answer: tier={match_result.match_type.value}, "
                          f"confidence={match_result.confidence:.3f}")

        self._update_stats(match_result)

        return GradedAnswer(
            question_id=question.id,
            quiz_type=question.type,
            answer=answer,
            is_correct=match_result.is_correct,
            match_result=match_result,
            feedback=self._feedback(question, match_result),
            timestamp=datetime.now(),
        )

    def grade_batch(self, questions: List[QuizQuestion], answers: List[str]) -> List[GradedAnswer]:
        """Grade answers to a list of questions, in order."""
        if len(questions) != len(answers):
            raise ValueError("Questions and answers must have the same length")

        with PerformanceTimer(f"grading {len(answers)} answers", logger):
            graded = [self.grade(question, answer) for question, answer in zip(questions, answers)]

        logger.info(f"Batch grading complete: {sum(1 for g in graded if g.is_correct)}/{len(graded)} correct")
        return graded

    def _feedback(self, question: QuizQuestion, match_result: MatchResult) -> str:
        tier = match_result.match_type
        if tier is MatchTier.EXACT:
            return "Correct!"
        if tier is MatchTier.NORMALIZED:
            return f"Correct! Watch the accent marks: {match_result.matched_answer}"
        if tier is MatchTier.FUZZY:
            return f"Close enough! Check your spelling: {match_result.matched_answer}"
        return f"Not quite. The answer is: {question.correct_answer}"

    def _update_stats(self, match_result: MatchResult):
        self.grading_stats['total_graded'] += 1

        if match_result.is_correct:
            self.grading_stats['correct_count'] += 1
        else:
            self.grading_stats['incorrect_count'] += 1

        match_type = match_result.match_type.value
        distribution = self.grading_stats['match_type_distribution']
        distribution[match_type] = distribution.get(match_type, 0) + 1

    def get_grading_statistics(self) -> Dict[str, Any]:
        """Get statistics for everything graded since the last reset."""
        total = self.grading_stats['total_graded']

        if total == 0:
            return {'message': 'No answers graded yet'}

        stats = dict(self.grading_stats)
        stats['match_type_distribution'] = dict(self.grading_stats['match_type_distribution'])
        stats['accuracy_rate'] = self.grading_stats['correct_count'] / total
        # Lesson score, rounded half up to a whole percent
        stats['score_percent'] = math.floor(self.grading_stats['correct_count'] / total * 100 + 0.5)
        stats['match_type_distribution_pct'] = {
            k: (v / total) * 100 for k, v in stats['match_type_distribution'].items()
        }

        return stats

    def reset_statistics(self):
        """Reset grading statistics."""
        self.grading_stats = {
            'total_graded': 0,
            'correct_count': 0,
            'incorrect_count': 0,
            'match_type_distribution': {},
        }
