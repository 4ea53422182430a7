"""Top-level application state and the actions wired to the UI."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from src.errors import GenerationError, InputError
from src.models.learning import AppStatus, ContentTab, LearningModule
from src.quiz.engine import Evaluator, QuizEngine

logger = logging.getLogger(__name__)

ModuleGenerator = Callable[[str], LearningModule]

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


@dataclass
class ShellState:
    """Everything the front end needs to draw one frame."""

    source_code: str = ""
    status: AppStatus = AppStatus.IDLE
    module: LearningModule | None = None
    error: str | None = None
    active_tab: ContentTab = ContentTab.EXPLANATION
    quiz: QuizEngine | None = field(default=None, repr=False)


def _default_generator(source_code: str) -> LearningModule:
    from src.agents.generator import generate_learning_module

    return generate_learning_module(source_code)


class AppShell:
    """
    Owns ``ShellState`` and applies user actions to it.

    The generator and evaluator are injected so the front end and the tests
    share the same control flow.
    """

    def __init__(
        self,
        generator: ModuleGenerator | None = None,
        evaluator: Evaluator | None = None,
    ):
        self.state = ShellState()
        self._generator = generator or _default_generator
        self._evaluator = evaluator

    @property
    def can_generate(self) -> bool:
        return self.state.status != AppStatus.LOADING

    def set_source(self, source_code: str) -> None:
        self.state.source_code = source_code

    def validate_source(self) -> None:
        """
        Reject blank input before any request is made.

        Raises:
            InputError: If the source is empty or whitespace
        """
        if not self.state.source_code.strip():
            raise InputError()

    def begin_generation(self) -> bool:
        """
        Validate input and move to LOADING.

        Returns:
            True if a request should be dispatched
        """
        if not self.can_generate:
            return False
        try:
            self.validate_source()
        except InputError as e:
            # Blank input keeps the current status and module
            self.state.error = e.message
            return False

        self.state.status = AppStatus.LOADING
        self.state.error = None
        self.state.module = None
        self.state.quiz = None
        return True

    def finish_generation(self) -> None:
        """Run the generator for the current source and store the outcome."""
        source = self.state.source_code
        try:
            module = self._generator(source)
        except GenerationError as e:
            self._fail(e.message)
            return
        except Exception as e:
            logger.exception("Unexpected error while generating module")
            self._fail(str(e) or UNEXPECTED_ERROR_MESSAGE)
            return

        self.state.module = module
        self.state.quiz = QuizEngine(
            module.quiz,
            language=module.language,
            context_code=source,
            evaluator=self._evaluator,
        )
        self.state.status = AppStatus.SUCCESS
        self.state.active_tab = ContentTab.EXPLANATION

    def generate(self) -> None:
        """Validate, request a module and store the result or the error."""
        if self.begin_generation():
            self.finish_generation()

    def select_tab(self, tab: ContentTab) -> None:
        if self.state.module is not None:
            self.state.active_tab = tab

    def clear(self) -> None:
        """Discard the module and quiz and return to the idle placeholder."""
        self.state.module = None
        self.state.quiz = None
        self.state.error = None
        self.state.status = AppStatus.IDLE
        self.state.active_tab = ContentTab.EXPLANATION

    def _fail(self, message: str) -> None:
        self.state.status = AppStatus.ERROR
        self.state.error = message
        self.state.module = None
        self.state.quiz = None
