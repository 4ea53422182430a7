"""Quiz progression and scoring state machine."""

import logging
from collections.abc import Callable, Sequence
from enum import Enum

from src.models.quiz import ChoiceQuestion, CodeQuestion, EvaluationResult, QuizQuestion

logger = logging.getLogger(__name__)

# (task, user_code, language, context_code) -> EvaluationResult
Evaluator = Callable[[str, str, str, str], EvaluationResult]

PERFECT_SCORE_MESSAGE = "Perfect! You've mastered this concept."
PARTIAL_SCORE_MESSAGE = "Good effort! Keep practicing."


class QuestionPhase(str, Enum):
    """Where the current question is in its answer cycle."""

    ANSWERING = "answering"
    EVALUATING = "evaluating"
    REVIEWED = "reviewed"


def _default_evaluator(
    task: str, user_code: str, language: str, context_code: str
) -> EvaluationResult:
    # Imported lazily so the engine has no hard dependency on the LLM stack
    from src.agents.evaluator import evaluate_code_answer

    return evaluate_code_answer(task, user_code, language, context_code)


class QuizEngine:
    """
    Drives a single run through a module's quiz.

    The current question is always in exactly one ``QuestionPhase``:

    * ANSWERING - the learner picks an option or edits code
    * EVALUATING - a code answer is being graded; every mutation is refused
    * REVIEWED - feedback is visible; only ``advance``, ``reset`` and
      ``reveal_solution`` do anything

    Advancing past the last reviewed question sets ``finished``. Invalid
    transitions are silent no-ops.
    """

    def __init__(
        self,
        questions: Sequence[QuizQuestion],
        language: str = "",
        context_code: str = "",
        evaluator: Evaluator | None = None,
    ):
        if not questions:
            raise ValueError("A quiz needs at least one question")
        self._questions = tuple(questions)
        self.language = language
        self.context_code = context_code
        self._evaluator = evaluator or _default_evaluator
        self.reset()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def questions(self) -> tuple[QuizQuestion, ...]:
        return self._questions

    @property
    def total(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_question(self) -> QuizQuestion:
        return self._questions[self._index]

    @property
    def is_last_question(self) -> bool:
        return self._index == self.total - 1

    @property
    def phase(self) -> QuestionPhase:
        return self._phase

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def score(self) -> int:
        return self._score

    @property
    def answered_count(self) -> int:
        """Number of questions submitted so far in this run."""
        return self._answered

    @property
    def selected_option(self) -> int | None:
        return self._selected_option

    @property
    def code(self) -> str:
        return self._code

    @property
    def evaluation(self) -> EvaluationResult | None:
        return self._evaluation

    @property
    def last_answer_correct(self) -> bool | None:
        """Correctness of the current question once reviewed, else None."""
        return self._last_correct

    @property
    def feedback_visible(self) -> bool:
        return not self._finished and self._phase == QuestionPhase.REVIEWED

    @property
    def is_evaluating(self) -> bool:
        return self._phase == QuestionPhase.EVALUATING

    @property
    def solution_visible(self) -> bool:
        return self._solution_visible

    @property
    def progress(self) -> float:
        """Position of the current question as a fraction of the quiz (0-1]."""
        if self._finished:
            return 1.0
        return (self._index + 1) / self.total

    @property
    def can_submit(self) -> bool:
        if self._finished or self._phase != QuestionPhase.ANSWERING:
            return False
        if isinstance(self.current_question, ChoiceQuestion):
            return self._selected_option is not None
        return bool(self._code.strip())

    @property
    def can_reveal_solution(self) -> bool:
        question = self.current_question
        return (
            self.feedback_visible
            and isinstance(question, CodeQuestion)
            and self._last_correct is False
            and bool(question.solution)
        )

    def summary_message(self) -> str:
        """Closing message for the completion screen."""
        if self._score == self.total:
            return PERFECT_SCORE_MESSAGE
        return PARTIAL_SCORE_MESSAGE

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def select_option(self, index: int) -> None:
        """Choose an option on a multiple choice question before submitting."""
        if not self._accepts_answer_input(ChoiceQuestion):
            return
        if not 0 <= index < len(self.current_question.options):
            return
        self._selected_option = index

    def edit_code(self, text: str) -> None:
        """Replace the in-progress code on a code question before submitting."""
        if not self._accepts_answer_input(CodeQuestion):
            return
        self._code = text

    def submit(self) -> bool:
        """
        Submit the current answer and reveal feedback.

        Multiple choice answers are scored locally. Code answers are graded by
        the evaluator; the engine stays in EVALUATING until it returns.

        Returns:
            True if the submission was accepted
        """
        if not self.can_submit:
            return False

        question = self.current_question
        if isinstance(question, ChoiceQuestion):
            correct = self._selected_option == question.correct_answer_index
            self._review(correct)
            return True

        self._phase = QuestionPhase.EVALUATING
        result = self._evaluate(question)
        self._evaluation = result
        self._review(result.is_correct)
        return True

    def advance(self) -> None:
        """Move to the next question, or finish after the last one."""
        if not self.feedback_visible:
            return

        if self.is_last_question:
            self._finished = True
            logger.info("Quiz finished: %d/%d", self._score, self.total)
            return

        self._index += 1
        self._enter_question()

    def reset(self) -> None:
        """Start the run over from the first question with a zero score."""
        self._index = 0
        self._score = 0
        self._answered = 0
        self._finished = False
        self._enter_question()

    def reveal_solution(self) -> None:
        """Show the reference solution after an incorrect code answer."""
        if self.can_reveal_solution:
            self._solution_visible = True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _enter_question(self) -> None:
        question = self.current_question
        self._phase = QuestionPhase.ANSWERING
        self._selected_option = None
        self._code = question.starter_code if isinstance(question, CodeQuestion) else ""
        self._evaluation = None
        self._last_correct = None
        self._solution_visible = False

    def _accepts_answer_input(self, kind: type) -> bool:
        return (
            not self._finished
            and self._phase == QuestionPhase.ANSWERING
            and isinstance(self.current_question, kind)
        )

    def _evaluate(self, question: CodeQuestion) -> EvaluationResult:
        task = question.task or question.question
        try:
            result = self._evaluator(task, self._code, self.language, self.context_code)
        except Exception as e:
            logger.warning("Evaluator raised, treating answer as incorrect: %s", e)
            return EvaluationResult.failed()
        if not isinstance(result, EvaluationResult):
            return EvaluationResult.failed()
        return result

    def _review(self, correct: bool) -> None:
        if correct:
            self._score += 1
        self._answered += 1
        self._last_correct = correct
        self._phase = QuestionPhase.REVIEWED
