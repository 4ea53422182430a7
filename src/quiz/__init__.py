"""Quiz progression and scoring."""

from .engine import Evaluator, QuestionPhase, QuizEngine

__all__ = ["QuizEngine", "QuestionPhase", "Evaluator"]
