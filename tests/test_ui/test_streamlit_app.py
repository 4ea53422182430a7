"""Tests for the Streamlit page, driven through Streamlit's AppTest harness."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from streamlit.testing.v1 import AppTest

from src.models.learning import AppStatus, ContentTab, LearningModule
from src.quiz.engine import QuestionPhase
from src.ui.shell import AppShell

APP_SCRIPT = str(Path(__file__).resolve().parents[2] / "streamlit_app.py")


def _button(at: AppTest, label: str):
    return next(b for b in at.button if b.label == label)


@pytest.fixture
def generator(sample_module: LearningModule) -> MagicMock:
    return MagicMock(return_value=sample_module)


@pytest.fixture
def shell(generator: MagicMock, recording_evaluator: MagicMock) -> AppShell:
    return AppShell(generator=generator, evaluator=recording_evaluator)


@pytest.fixture
def code_question_shell(shell: AppShell) -> AppShell:
    """A shell whose quiz sits on the code question."""
    shell.set_source("x = 1")
    shell.generate()
    shell.select_tab(ContentTab.QUIZ)
    shell.state.quiz.select_option(1)
    shell.state.quiz.submit()
    shell.state.quiz.advance()
    return shell


def _app(shell: AppShell) -> AppTest:
    at = AppTest.from_file(APP_SCRIPT, default_timeout=10)
    at.session_state["shell"] = shell
    return at


class TestPage:
    """Test the page layout and the generate flow."""

    def test_idle_placeholder(self, shell: AppShell):
        at = _app(shell).run()

        assert not at.exception
        assert any("Ready to Learn?" in m.value for m in at.markdown)

    def test_generate_loads_module(self, shell: AppShell, generator: MagicMock):
        at = _app(shell).run()
        at.text_area(key="source_code").input("x = 1")
        _button(at, "Generate Tutorial & Quiz").click()
        at.run()

        assert not at.exception
        generator.assert_called_once_with("x = 1")
        assert shell.state.status == AppStatus.SUCCESS
        assert any("PYTHON MODULE" in m.value for m in at.markdown)


class TestCodeQuestionView:
    """Test the code editor wiring on the quiz tab."""

    def test_editor_starts_with_starter_code(self, code_question_shell: AppShell):
        at = _app(code_question_shell).run()

        assert at.text_area(key="quiz_code_1").value == "def rev(xs):\n    pass"

    def test_blank_code_shows_warning(
        self, code_question_shell: AppShell, recording_evaluator: MagicMock
    ):
        at = _app(code_question_shell).run()
        at.text_area(key="quiz_code_1").input("   ")
        _button(at, "Submit Answer").click()
        at.run()

        assert [w.value for w in at.warning] == ["Write some code before submitting."]
        assert code_question_shell.state.quiz.phase == QuestionPhase.ANSWERING
        recording_evaluator.assert_not_called()

    def test_edited_code_reaches_evaluator(
        self, code_question_shell: AppShell, recording_evaluator: MagicMock
    ):
        answer = "def rev(xs):\n    return xs[::-1]"
        at = _app(code_question_shell).run()
        at.text_area(key="quiz_code_1").input(answer)
        _button(at, "Submit Answer").click()
        at.run()

        assert not at.exception
        assert recording_evaluator.call_args.args[1] == answer
        assert code_question_shell.state.quiz.phase == QuestionPhase.REVIEWED
        assert [s.value for s in at.success] == ["Correct!"]
