"""Data models for learning modules and quizzes."""

from .learning import AppStatus, ContentTab, LearningModule
from .quiz import (
    EVALUATION_FAILED_MESSAGE,
    ChoiceQuestion,
    CodeQuestion,
    EvaluationResult,
    QuizQuestion,
)

__all__ = [
    "AppStatus",
    "ContentTab",
    "LearningModule",
    "ChoiceQuestion",
    "CodeQuestion",
    "QuizQuestion",
    "EvaluationResult",
    "EVALUATION_FAILED_MESSAGE",
]
