"""
Integration Tests for a Complete Quiz Session

Loads quiz content from YAML, grades a session of answers and checks the
final lesson score, using configuration loaded from a file.
"""

import pytest
import yaml

from chamorro_eval import MatchTier, QuizGrader, QuizQuestion, evaluate, normalize
from chamorro_eval.core.config import reload_config


QUIZ_CONTENT = """
questions:
  - id: num-1
    type: multiple_choice
    question: What is "three" in Chamorro?
    options: [Unu, Dos, Tres, Kuåttro]
    correctAnswer: Tres
  - id: num-2
    type: type_answer
    question: Type the Chamorro word for "seven"
    correctAnswer: Siete
    acceptableAnswers: [siette]
  - id: greet-1
    type: type_answer
    question: Type the Chamorro greeting for "Hello"
    correctAnswer: Håfa Adai
  - id: thanks-1
    type: fill_blank
    question: 'Complete: "Si Yu''os ___" (Thank you)'
    correctAnswer: Ma'åse'
  - id: place-1
    type: type_answer
    question: Type the Chamorro name for Guam
    correctAnswer: Guåhan
"""


class TestQuizFlow:
    """Integration tests for grading a whole quiz."""

    @pytest.fixture
    def questions(self):
        data = yaml.safe_load(QUIZ_CONTENT)
        return [QuizQuestion.from_dict(item) for item in data['questions']]

    @pytest.fixture
    def config_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv('ANSWER_SIMILARITY_THRESHOLD', raising=False)
        path = tmp_path / "default.yaml"
        path.write_text("evaluation:\n  similarity_threshold: 0.8\n", encoding='utf-8')
        return path

    def test_full_session(self, questions, config_file):
        reload_config(config_file)
        grader = QuizGrader()

        answers = ["Dos", "SIETTE", "hafa adai", "maase", "guahn"]
        graded = grader.grade_batch(questions, answers)

        tiers = [g.match_result.match_type for g in graded]
        assert tiers == [
            MatchTier.NONE,        # wrong option, never upgraded
            MatchTier.EXACT,       # alternate spelling
            MatchTier.NORMALIZED,  # missing accent
            MatchTier.NORMALIZED,  # missing glottal stops and accent
            MatchTier.FUZZY,       # one letter dropped
        ]

        stats = grader.get_grading_statistics()
        assert stats['correct_count'] == 4
        assert stats['score_percent'] == 80

    def test_stricter_configured_threshold(self, questions, tmp_path, monkeypatch):
        monkeypatch.delenv('ANSWER_SIMILARITY_THRESHOLD', raising=False)
        path = tmp_path / "strict.yaml"
        path.write_text("evaluation:\n  similarity_threshold: 0.9\n", encoding='utf-8')
        reload_config(path)

        graded = QuizGrader().grade(questions[-1], "guahn")
        assert not graded.is_correct

    def test_public_entry_points(self):
        assert normalize("Guåhan") == "guahan"
        assert evaluate("guahan", "Guåhan") == MatchTier.NORMALIZED
