"""Shared test fixtures and configuration for pytest."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from src.models.learning import LearningModule
from src.models.quiz import ChoiceQuestion, CodeQuestion, EvaluationResult


@pytest.fixture
def sample_choice_question() -> ChoiceQuestion:
    """Create a sample multiple choice question for testing."""
    return ChoiceQuestion(
        question="What does `sorted([3, 1, 2])` return?",
        options=["[3, 1, 2]", "[1, 2, 3]", "None", "A generator"],
        correct_answer_index=1,
        explanation="`sorted()` returns a new list in ascending order.",
    )


@pytest.fixture
def sample_code_question() -> CodeQuestion:
    """Create a sample code-writing question for testing."""
    return CodeQuestion(
        question="Reverse a list",
        task="Write a function `rev(xs)` that returns xs reversed.",
        starter_code="def rev(xs):\n    pass",
        solution="def rev(xs):\n    return xs[::-1]",
        explanation="Slicing with a step of -1 walks the list backwards.",
    )


@pytest.fixture
def sample_module(
    sample_choice_question: ChoiceQuestion,
    sample_code_question: CodeQuestion,
) -> LearningModule:
    """Create a sample LearningModule for testing."""
    return LearningModule(
        language="Python",
        explanation="## What it does\nSorts a list.",
        tutorial="### Sorting\n* `sorted()` builds a new list",
        example="```python\nprint(sorted([2, 1]))\n```",
        quiz=[sample_choice_question, sample_code_question],
    )


@pytest.fixture
def sample_module_payload() -> dict[str, Any]:
    """A camelCase payload as returned by the model."""
    return {
        "language": "Python",
        "explanation": "Explains the snippet.",
        "tutorial": "Teaches list slicing.",
        "example": "A bigger example.",
        "quiz": [
            {
                "type": "choice",
                "question": "Q1",
                "options": ["a", "b", "c", "d"],
                "correctAnswerIndex": 1,
                "explanation": "b is right.",
            },
            {
                "type": "code",
                "question": "Q2",
                "task": "Write x = 1",
                "starterCode": "",
                "explanation": "Assignment.",
            },
        ],
    }


@pytest.fixture
def correct_evaluation() -> EvaluationResult:
    return EvaluationResult(is_correct=True, feedback="Nice work.", score=90)


@pytest.fixture
def recording_evaluator(correct_evaluation: EvaluationResult) -> MagicMock:
    """Evaluator stub that records its calls and grades everything correct."""
    return MagicMock(return_value=correct_evaluation)


@pytest.fixture
def failing_evaluator() -> MagicMock:
    """Evaluator stub that raises like an unreachable upstream."""
    return MagicMock(side_effect=RuntimeError("upstream unavailable"))


@pytest.fixture
def mock_chat_model() -> MagicMock:
    """A chat model whose structured-output runnable can be configured per test."""
    llm = MagicMock()
    llm.with_structured_output.return_value = MagicMock()
    return llm
