"""Code Evaluator Agent - Grades code answers written in the quiz."""

import logging

from langchain_core.messages import HumanMessage, SystemMessage

from src.agents.llm import create_chat_model
from src.config.settings import get_settings
from src.models.quiz import EvaluationResult

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a strict but encouraging programming instructor grading a student's code.

For the submitted code, decide:
1. Does it correctly accomplish the task? (isCorrect)
2. A score from 0 to 100 reflecting correctness, clarity and idiomatic style
3. Concise feedback: what works, what is wrong, and how to fix it

Judge the code on its logic; minor formatting differences are not errors."""


def build_evaluation_prompt(
    task: str, user_code: str, language: str, context_code: str
) -> str:
    """
    Build the user prompt for grading one code answer.

    Args:
        task: The task (or question text) the learner was given
        user_code: The learner's submission
        language: Language label detected for the module
        context_code: The snippet the module was generated from

    Returns:
        Prompt text
    """
    return f"""Grade this {language or "code"} answer.

Task:
{task}

Original code the lesson is based on:
```
{context_code}
```

Student submission:
```
{user_code}
```

Evaluate the submission and provide the grading result."""


def evaluate_code_answer(
    task: str, user_code: str, language: str, context_code: str
) -> EvaluationResult:
    """
    Code Evaluator Agent: Grade a code answer.

    This never raises. Any upstream failure or malformed payload is downgraded
    to ``EvaluationResult.failed()`` so the quiz can always reach feedback.

    Args:
        task: The task (or question text) the learner was given
        user_code: The learner's submission
        language: Language label detected for the module
        context_code: The snippet the module was generated from

    Returns:
        EvaluationResult from the model, or the negative default on failure
    """
    try:
        settings = get_settings()
        llm = create_chat_model(settings.evaluation_temperature)
        llm_with_structure = llm.with_structured_output(EvaluationResult)

        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(
                content=build_evaluation_prompt(task, user_code, language, context_code)
            ),
        ]

        result = llm_with_structure.invoke(messages)
    except Exception as e:
        logger.warning("Code evaluation failed, using default result: %s", e)
        return EvaluationResult.failed()

    if not isinstance(result, EvaluationResult):
        logger.warning("Model returned no evaluation (got %r)", type(result).__name__)
        return EvaluationResult.failed()

    logger.debug("Evaluation: correct=%s score=%d", result.is_correct, result.score)
    return result
