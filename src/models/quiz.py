"""Pydantic models for quiz questions and answer evaluation."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

EVALUATION_FAILED_MESSAGE = (
    "We couldn't evaluate your code right now. Please review the solution and try again."
)

# Wire payloads use camelCase keys; attributes stay snake_case.
_WIRE_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "frozen": True,
}


class ChoiceQuestion(BaseModel):
    """A multiple choice question with a single correct option."""

    type: Literal["choice"] = Field(
        default="choice",
        description="Question variant discriminant",
    )
    question: str = Field(..., min_length=1, description="The question text")
    options: list[str] = Field(
        ...,
        min_length=2,
        description="Answer options in display order (exactly 4 are requested)",
    )
    correct_answer_index: int = Field(
        ...,
        ge=0,
        description="Zero-based index of the correct option",
    )
    explanation: str = Field(
        ...,
        description="Explanation shown after the question is answered",
    )

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str]) -> list[str]:
        """Ensure no option is blank."""
        for index, value in enumerate(v):
            if not value or not value.strip():
                raise ValueError(f"Option {index} cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_correct_answer_index(self) -> "ChoiceQuestion":
        """Ensure the correct answer points at an existing option."""
        if self.correct_answer_index >= len(self.options):
            raise ValueError(
                f"correctAnswerIndex {self.correct_answer_index} is out of range "
                f"for {len(self.options)} options"
            )
        return self

    model_config = {
        **_WIRE_CONFIG,
        "json_schema_extra": {
            "example": {
                "type": "choice",
                "question": "What does `sorted()` return?",
                "options": [
                    "The original list, sorted in place",
                    "A new sorted list",
                    "None",
                    "A generator",
                ],
                "correctAnswerIndex": 1,
                "explanation": "`sorted()` always builds and returns a new list.",
            }
        },
    }


class CodeQuestion(BaseModel):
    """A free-form coding exercise graded by the evaluation agent."""

    type: Literal["code"] = Field(
        default="code",
        description="Question variant discriminant",
    )
    question: str = Field(..., min_length=1, description="Short question title")
    task: str = Field(..., min_length=1, description="What the learner must write")
    starter_code: str = Field(
        ...,
        description="Code the editor starts with (may be empty)",
    )
    solution: str | None = Field(
        None,
        description="Reference solution revealed after an incorrect answer",
    )
    explanation: str = Field(
        ...,
        description="Explanation shown after the question is answered",
    )

    model_config = {
        **_WIRE_CONFIG,
        "json_schema_extra": {
            "example": {
                "type": "code",
                "question": "Reverse a list",
                "task": "Write a function `rev(xs)` that returns xs reversed.",
                "starterCode": "def rev(xs):\n    pass",
                "solution": "def rev(xs):\n    return xs[::-1]",
                "explanation": "Slicing with a step of -1 walks the list backwards.",
            }
        },
    }


QuizQuestion = Annotated[Union[ChoiceQuestion, CodeQuestion], Field(discriminator="type")]


class EvaluationResult(BaseModel):
    """Grading result for a submitted code answer."""

    is_correct: bool = Field(..., description="Whether the code solves the task")
    feedback: str = Field(..., description="Feedback for the learner")
    score: int = Field(..., ge=0, le=100, description="Score from 0 to 100")

    model_config = {
        **_WIRE_CONFIG,
        "json_schema_extra": {
            "example": {
                "isCorrect": True,
                "feedback": "Correct and idiomatic.",
                "score": 95,
            }
        },
    }

    @classmethod
    def failed(cls, message: str = EVALUATION_FAILED_MESSAGE) -> "EvaluationResult":
        """Negative result used when grading could not be completed."""
        return cls(is_correct=False, feedback=message, score=0)
