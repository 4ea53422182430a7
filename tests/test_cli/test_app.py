"""Tests for the Typer CLI."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from src.cli.app import app, run_quiz
from src.errors import GenerationError
from src.models.learning import LearningModule
from src.quiz.engine import QuizEngine

runner = CliRunner()


class TestGenerateCommand:
    """Test the generate command."""

    def test_prints_module(self, tmp_path: Path, sample_module: LearningModule):
        source = tmp_path / "snippet.py"
        source.write_text("print(sorted([3, 1, 2]))", encoding="utf-8")

        with patch("src.cli.app.generate_learning_module", return_value=sample_module) as gen:
            result = runner.invoke(app, ["generate", str(source), "--answers"])

        assert result.exit_code == 0
        gen.assert_called_once_with("print(sorted([3, 1, 2]))")
        assert "PYTHON MODULE" in result.output
        assert "Pro Example" in result.output

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["generate", str(tmp_path / "nope.py")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_blank_file(self, tmp_path: Path):
        source = tmp_path / "blank.py"
        source.write_text("   \n", encoding="utf-8")

        with patch("src.cli.app.generate_learning_module") as gen:
            result = runner.invoke(app, ["generate", str(source)])

        assert result.exit_code == 1
        assert "Please paste some code first!" in result.output
        gen.assert_not_called()

    def test_generation_error(self, tmp_path: Path):
        source = tmp_path / "snippet.py"
        source.write_text("x = 1", encoding="utf-8")

        with patch("src.cli.app.generate_learning_module", side_effect=GenerationError()):
            result = runner.invoke(app, ["generate", str(source)])

        assert result.exit_code == 1
        assert "Failed to generate learning module" in result.output

    def test_model_construction_error(self, tmp_path: Path):
        source = tmp_path / "snippet.py"
        source.write_text("x = 1", encoding="utf-8")

        with patch(
            "src.agents.generator.create_chat_model",
            side_effect=ValueError("You must specify a region"),
        ):
            result = runner.invoke(app, ["generate", str(source)])

        assert result.exit_code == 1
        assert "Failed to generate learning module" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_reads_stdin(self, sample_module: LearningModule):
        with patch("src.cli.app.generate_learning_module", return_value=sample_module) as gen:
            result = runner.invoke(app, ["generate", "-"], input="x = 1\n")

        assert result.exit_code == 0
        gen.assert_called_once_with("x = 1\n")


class TestInfoCommand:
    def test_shows_provider(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "CodeMaster AI Tutor" in result.output


class TestRunQuiz:
    """Test the terminal quiz loop."""

    def test_full_run(self, sample_module: LearningModule, recording_evaluator: MagicMock):
        engine = QuizEngine(sample_module.quiz, evaluator=recording_evaluator)

        with (
            patch("src.cli.app.IntPrompt.ask", return_value=2),
            patch("src.cli.app.Prompt.ask", side_effect=["def rev(xs):", "    return xs[::-1]", "EOF"]),
            patch("src.cli.app.Confirm.ask", return_value=False),
        ):
            run_quiz(engine)

        assert engine.finished is True
        assert engine.score == 2
        recording_evaluator.assert_called_once()
