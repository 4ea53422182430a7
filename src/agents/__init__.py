"""AI agents for learning module generation and grading."""

from .evaluator import evaluate_code_answer
from .generator import generate_learning_module
from .llm import create_chat_model

__all__ = [
    "create_chat_model",
    "generate_learning_module",
    "evaluate_code_answer",
]
