"""Pydantic models for generated learning modules and app status."""

from enum import Enum

from pydantic import BaseModel, Field

from src.models.quiz import ChoiceQuestion, CodeQuestion, QuizQuestion


class AppStatus(str, Enum):
    """Lifecycle of the module generation request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ContentTab(str, Enum):
    """Tabs shown once a module is loaded."""

    EXPLANATION = "explanation"
    TUTORIAL = "tutorial"
    EXAMPLE = "example"
    QUIZ = "quiz"

    @property
    def label(self) -> str:
        """Display name for the tab."""
        return _TAB_LABELS[self]


_TAB_LABELS = {
    ContentTab.EXPLANATION: "Explanation",
    ContentTab.TUTORIAL: "Tutorial",
    ContentTab.EXAMPLE: "Pro Example",
    ContentTab.QUIZ: "Quiz",
}


class LearningModule(BaseModel):
    """Explanation, tutorial, example and quiz generated for one snippet."""

    language: str = Field(..., min_length=1, description="Detected source language")
    explanation: str = Field(..., description="Step-by-step explanation of the code")
    tutorial: str = Field(..., description="Tutorial on the concepts the code uses")
    example: str = Field(..., description="Expanded or related advanced example")
    quiz: list[QuizQuestion] = Field(
        ...,
        min_length=1,
        description="Quiz questions in presentation order",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @property
    def question_count(self) -> int:
        """Get the number of quiz questions."""
        return len(self.quiz)

    @property
    def choice_count(self) -> int:
        """Get the number of multiple choice questions."""
        return sum(1 for q in self.quiz if isinstance(q, ChoiceQuestion))

    @property
    def code_count(self) -> int:
        """Get the number of code-writing questions."""
        return sum(1 for q in self.quiz if isinstance(q, CodeQuestion))

    def content_for(self, tab: ContentTab) -> str:
        """Get the prose for a content tab (the quiz tab has none)."""
        if tab == ContentTab.QUIZ:
            raise ValueError("The quiz tab is rendered by the quiz engine")
        return getattr(self, tab.value)
