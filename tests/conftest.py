"""
Pytest Configuration

Global test configuration and fixtures for the answer evaluation test suite.
"""

import pytest
from pathlib import Path

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from chamorro_eval.core.config import AppConfig, set_config
from chamorro_eval.evaluation.grader import QuizQuestion


@pytest.fixture(autouse=True)
def default_config():
    """Install a fresh default configuration for every test."""
    config = AppConfig()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def sample_questions_data():
    """Provide sample quiz content."""
    return [
        {
            "id": "greet-1",
            "type": "multiple_choice",
            "question": 'What does "Håfa Adai" mean?',
            "options": ["Goodbye", "Hello / Hi", "Thank you", "Good night"],
            "correctAnswer": "Hello / Hi",
        },
        {
            "id": "greet-2",
            "type": "multiple_choice",
            "question": 'How do you say "Thank you" in Chamorro?',
            "options": ["Håfa Adai", "Adios", "Si Yu'os Ma'åse'", "Buenas"],
            "correctAnswer": "Si Yu'os Ma'åse'",
        },
        {
            "id": "greet-3",
            "type": "type_answer",
            "question": 'Type the Chamorro word for "Goodbye"',
            "correctAnswer": "Adios",
            "acceptableAnswers": ["adios", "Bula", "bula"],
            "hint": "It's similar to the Spanish word",
        },
        {
            "id": "greet-4",
            "type": "fill_blank",
            "question": 'Complete: "Håfa ___" (Hello)',
            "correctAnswer": "Adai",
            "acceptableAnswers": ["adai"],
        },
    ]


@pytest.fixture
def sample_questions(sample_questions_data):
    """Provide parsed sample quiz questions keyed by id."""
    questions = [QuizQuestion.from_dict(data) for data in sample_questions_data]
    return {question.id: question for question in questions}
