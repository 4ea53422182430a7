"""Typer CLI application for learning module generation."""

import importlib.util
import subprocess
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.syntax import Syntax
from rich.table import Table

from src.agents.generator import generate_learning_module
from src.config.logging_setup import setup_logging
from src.config.settings import get_settings
from src.errors import CodeMasterError, InputError
from src.models.learning import ContentTab, LearningModule
from src.models.quiz import ChoiceQuestion, CodeQuestion
from src.quiz.engine import QuizEngine

app = typer.Typer(
    name="codemaster",
    help="Turn code snippets into explanations, tutorials and quizzes",
    add_completion=False,
)

console = Console()


def read_source(source: str) -> str:
    """
    Read source code from a file path, or stdin when the path is "-".

    Raises:
        InputError: If the source is blank
    """
    if source == "-":
        text = sys.stdin.read()
    else:
        path = Path(source)
        if not path.is_file():
            console.print(f"[red]Error:[/red] File not found: {source}", style="bold")
            raise typer.Exit(code=1)
        text = path.read_text(encoding="utf-8")

    if not text.strip():
        raise InputError()
    return text


def build_module(source: str) -> tuple[str, LearningModule]:
    """Read the source and generate its module with a progress spinner."""
    try:
        code = read_source(source)
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("[cyan]Generating learning module...", total=None)
            module = generate_learning_module(code)
            progress.update(task, description="[green]Learning module ready!")
    except CodeMasterError as e:
        console.print(f"\n[red]Error:[/red] {e.message}", style="bold")
        raise typer.Exit(code=1)

    return code, module


@app.command()
def serve(
    port: int = typer.Option(8501, "--port", "-p", help="Port for the web UI"),
    headless: bool = typer.Option(
        False,
        "--headless/--browser",
        help="Do not open a browser window",
    ),
) -> None:
    """Launch the browser UI."""
    spec = importlib.util.find_spec("streamlit_app")
    if spec is None or spec.origin is None:
        console.print("[red]Error:[/red] streamlit_app.py not found.", style="bold")
        raise typer.Exit(code=1)

    command = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        spec.origin,
        "--server.port",
        str(port),
        "--server.headless",
        str(headless).lower(),
    ]
    console.print(f"[cyan]Starting CodeMaster AI on http://localhost:{port}[/cyan]")
    raise typer.Exit(code=subprocess.call(command))


@app.command()
def generate(
    source: str = typer.Argument(..., help="Source file to learn from ('-' for stdin)"),
    show_answers: bool = typer.Option(
        False,
        "--answers/--no-answers",
        help="Show correct options and reference solutions",
    ),
) -> None:
    """
    Generate a learning module and print it.

    Example:
        codemaster generate quicksort.py --answers
    """
    _, module = build_module(source)
    display_module(module, show_answers)


@app.command()
def quiz(
    source: str = typer.Argument(..., help="Source file to learn from ('-' for stdin)"),
) -> None:
    """Generate a module and take its quiz in the terminal."""
    code, module = build_module(source)
    engine = QuizEngine(module.quiz, language=module.language, context_code=code)
    run_quiz(engine)


@app.command()
def info() -> None:
    """Display information about the tutor."""
    settings = get_settings()
    info_text = f"""
[bold cyan]CodeMaster AI Tutor[/bold cyan]
Version: 0.1.0

[bold]Agents:[/bold]
  • Generator Agent - Explanation, tutorial, example and quiz
  • Evaluator Agent - Grades code-writing answers

[bold]Quiz:[/bold]
  • Multiple choice questions scored instantly
  • Code questions graded by the model

[bold]Provider:[/bold] {settings.llm_provider}
[bold]Model:[/bold] {settings.model_name}
    """
    console.print(Panel(info_text, title="CodeMaster Info", border_style="cyan"))


def display_module(module: LearningModule, show_answers: bool = False) -> None:
    """Print every content section and the quiz overview."""
    console.print(
        f"\n[bold green]●[/bold green] [bold]{module.language.upper()} MODULE[/bold]"
    )

    for tab in (ContentTab.EXPLANATION, ContentTab.TUTORIAL, ContentTab.EXAMPLE):
        console.print()
        console.print(
            Panel(Markdown(module.content_for(tab)), title=tab.label, border_style="cyan")
        )

    table = Table(title="Quiz", border_style="green")
    table.add_column("#", style="cyan")
    table.add_column("Type", style="white")
    table.add_column("Question", style="white")
    if show_answers:
        table.add_column("Answer", style="green")

    for i, question in enumerate(module.quiz, start=1):
        row = [str(i), question.type, question.question]
        if show_answers:
            if isinstance(question, ChoiceQuestion):
                row.append(
                    f"{chr(65 + question.correct_answer_index)}. "
                    f"{question.options[question.correct_answer_index]}"
                )
            else:
                row.append(question.solution or "-")
        table.add_row(*row)

    console.print()
    console.print(table)


def _ask_code(question: CodeQuestion, starter_code: str) -> str:
    console.print(Markdown(question.task))
    if starter_code:
        console.print(Syntax(starter_code, "text", theme="monokai"))
    console.print("[dim]Enter your code. Finish with a line containing only 'EOF'.[/dim]")
    lines = []
    while True:
        line = Prompt.ask("", default="", show_default=False, console=console)
        if line.strip() == "EOF":
            break
        lines.append(line)
    return "\n".join(lines) or starter_code


def run_quiz(engine: QuizEngine) -> None:
    """Drive a QuizEngine from terminal prompts until the learner stops."""
    while True:
        while not engine.finished:
            question = engine.current_question
            console.print(
                f"\n[bold cyan]Question {engine.current_index + 1} of {engine.total}[/bold cyan]"
            )
            console.print(f"[bold]{question.question}[/bold]")

            if isinstance(question, ChoiceQuestion):
                for idx, option in enumerate(question.options):
                    console.print(f"  {chr(65 + idx)}. {option}")
                choice = IntPrompt.ask(
                    "Your answer (number)",
                    choices=[str(i + 1) for i in range(len(question.options))],
                    console=console,
                )
                engine.select_option(choice - 1)
            else:
                engine.edit_code(_ask_code(question, engine.code))
                if not engine.can_submit:
                    console.print("[yellow]Write some code before submitting.[/yellow]")
                    continue
                console.print("[cyan]Evaluating your code...[/cyan]")

            engine.submit()
            display_feedback(engine)
            engine.advance()

        console.print(
            Panel(
                f"[bold]{engine.score} / {engine.total}[/bold]\n{engine.summary_message()}",
                title="Quiz Completed!",
                border_style="green",
            )
        )
        if not Confirm.ask("Try again?", default=False, console=console):
            return
        engine.reset()


def display_feedback(engine: QuizEngine) -> None:
    """Print correctness, grading feedback and the explanation."""
    if engine.last_answer_correct:
        console.print("[green bold]Correct![/green bold]")
    else:
        console.print("[red bold]Incorrect[/red bold]")

    if engine.evaluation is not None:
        console.print(f"Score: {engine.evaluation.score}/100")
        console.print(Markdown(engine.evaluation.feedback))

    console.print(Markdown(engine.current_question.explanation))

    if engine.can_reveal_solution and Confirm.ask(
        "Show the reference solution?", default=False, console=console
    ):
        engine.reveal_solution()
        console.print(Syntax(engine.current_question.solution, "text", theme="monokai"))


@app.callback()
def callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override LOG_LEVEL for this run",
    ),
) -> None:
    """
    CodeMaster AI - Learn from any code snippet.
    """
    setup_logging(log_level or get_settings().log_level)


if __name__ == "__main__":
    app()
