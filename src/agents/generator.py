"""Module Generator Agent - Turns a code snippet into a learning module."""

import logging

from langchain_core.messages import HumanMessage, SystemMessage

from src.agents.llm import create_chat_model
from src.config.settings import get_settings
from src.errors import GenerationError
from src.models.learning import LearningModule

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are an elite programming tutor. Analyze code snippets and generate comprehensive learning modules.

Ensure all content is high-quality and uses Markdown for formatting (within the strings):
- Use ## and ### for headings, * for bullet items and **text** for emphasis
- Put code in fenced blocks tagged with the language (```python)"""


def build_generation_prompt(source_code: str, question_count: int) -> str:
    """
    Build the user prompt for module generation.

    Args:
        source_code: The snippet pasted by the user
        question_count: Number of quiz questions to request

    Returns:
        Prompt text
    """
    return f"""Analyze the following code snippet and generate a comprehensive learning module.

Code Snippet:
```
{source_code}
```

Requirements:
1. Identify the programming language.
2. Provide a clear, step-by-step explanation of what the code does.
3. Create a tutorial that teaches the core concepts demonstrated in the code.
4. Provide an expanded or related advanced example that builds on this logic.
5. Create a {question_count}-question interactive quiz to test understanding, in presentation order:
   - Multiple choice questions use type "choice" and must have exactly 4 options
     and the zero-based correctAnswerIndex of the single correct option.
   - Include at least one code-writing question of type "code" with a task, starterCode
     (may be an empty string) and a reference solution, in the same language as the snippet.
   - Every question needs an explanation shown after it is answered."""


def generate_learning_module(source_code: str) -> LearningModule:
    """
    Module Generator Agent: Generate explanation, tutorial, example and quiz.

    Args:
        source_code: Non-blank code snippet

    Returns:
        Validated LearningModule

    Raises:
        GenerationError: If the source is blank, the upstream call fails or the
            payload does not match the LearningModule shape
    """
    if not source_code or not source_code.strip():
        raise GenerationError()

    try:
        settings = get_settings()
        llm = create_chat_model(settings.generation_temperature)

        # Use structured output so the payload is validated against the model
        llm_with_structure = llm.with_structured_output(LearningModule)

        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(
                content=build_generation_prompt(source_code, settings.quiz_question_count)
            ),
        ]
        module = llm_with_structure.invoke(messages)
    except Exception as e:
        logger.exception("Learning module generation failed: %s", e)
        raise GenerationError() from e

    # with_structured_output returns None when the model skips the tool call
    if not isinstance(module, LearningModule):
        logger.error("Model returned no learning module (got %r)", type(module).__name__)
        raise GenerationError()

    logger.info(
        "Generated %s module with %d quiz questions (%d code)",
        module.language,
        module.question_count,
        module.code_count,
    )
    return module
