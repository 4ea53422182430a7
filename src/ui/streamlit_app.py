"""Streamlit front end: source input, content tabs and the interactive quiz."""

import logging

import streamlit as st

from src.config.logging_setup import setup_logging
from src.config.settings import get_settings
from src.models.learning import AppStatus, ContentTab
from src.models.quiz import ChoiceQuestion
from src.quiz.engine import QuestionPhase, QuizEngine
from src.rendering.markdown import DEFAULT_CODE_LABEL, CodeBlock, render_blocks
from src.ui.shell import AppShell

logger = logging.getLogger(__name__)

APP_TITLE = "CodeMaster AI"
CODE_WIDGET_PREFIX = "quiz_code_"

TIPS = """
* Include context if the snippet is part of a larger system.
* AI works best with code that has some logical depth.
* Works for Python, JavaScript, Rust, C++, and many more.
"""


# ----------------------------------------------------------------------
#  Session helpers
# ----------------------------------------------------------------------
def get_shell() -> AppShell:
    """Keep one AppShell per browser session."""
    if "shell" not in st.session_state:
        st.session_state["shell"] = AppShell()
    return st.session_state["shell"]


def _clear_code_widgets() -> None:
    """Drop stale code editor values so a new run starts from starter code."""
    for key in [k for k in st.session_state.keys() if str(k).startswith(CODE_WIDGET_PREFIX)]:
        del st.session_state[key]


def _code_language(label: str) -> str | None:
    label = (label or "").strip().lower()
    if not label or label == DEFAULT_CODE_LABEL:
        return None
    return label


# ----------------------------------------------------------------------
#  Content rendering
# ----------------------------------------------------------------------
def render_content(text: str) -> None:
    """Draw Markdown-ish module content block by block."""
    for block in render_blocks(text):
        if isinstance(block, CodeBlock):
            st.caption(block.language.upper())
            st.code(block.code, language=_code_language(block.language))
        else:
            st.markdown(block.html, unsafe_allow_html=True)


# ----------------------------------------------------------------------
#  Quiz rendering
# ----------------------------------------------------------------------
def _on_try_again(quiz: QuizEngine) -> None:
    quiz.reset()
    _clear_code_widgets()


def render_quiz_finished(quiz: QuizEngine) -> None:
    st.subheader("Quiz Completed!")
    st.metric("Score", f"{quiz.score} / {quiz.total}")
    st.write(quiz.summary_message())
    st.button("Try Again", on_click=_on_try_again, args=(quiz,), type="primary")


def _render_choice_options(quiz: QuizEngine, question: ChoiceQuestion) -> None:
    for idx, option in enumerate(question.options):
        marker = ""
        if quiz.feedback_visible:
            if idx == question.correct_answer_index:
                marker = "✅ "
            elif idx == quiz.selected_option:
                marker = "❌ "
        elif idx == quiz.selected_option:
            marker = "👉 "

        st.button(
            f"{marker}{chr(65 + idx)}. {option}",
            key=f"quiz_option_{quiz.current_index}_{idx}",
            on_click=quiz.select_option,
            args=(idx,),
            disabled=quiz.feedback_visible,
            type="primary" if idx == quiz.selected_option else "secondary",
            use_container_width=True,
        )


def _render_code_editor(quiz: QuizEngine, language: str) -> None:
    question = quiz.current_question
    st.markdown(question.task)

    key = f"{CODE_WIDGET_PREFIX}{quiz.current_index}"
    st.text_area(
        "Your code",
        value=quiz.code,
        key=key,
        height=240,
        disabled=quiz.phase != QuestionPhase.ANSWERING,
        on_change=lambda: quiz.edit_code(st.session_state[key]),
    )

    if quiz.solution_visible and question.solution:
        st.caption("Reference solution")
        st.code(question.solution, language=_code_language(language))


def _render_feedback(quiz: QuizEngine) -> None:
    if quiz.last_answer_correct:
        st.success("Correct!")
    else:
        st.error("Incorrect")

    if quiz.evaluation is not None:
        st.markdown(f"**Score:** {quiz.evaluation.score}/100")
        render_content(quiz.evaluation.feedback)

    render_content(quiz.current_question.explanation)

    if quiz.can_reveal_solution and not quiz.solution_visible:
        st.button("Show Solution", on_click=quiz.reveal_solution)


def render_quiz(quiz: QuizEngine, language: str) -> None:
    """Draw the current question, its feedback and the navigation button."""
    if quiz.finished:
        render_quiz_finished(quiz)
        return

    question = quiz.current_question
    st.caption(f"QUESTION {quiz.current_index + 1} OF {quiz.total}")
    st.progress(quiz.progress)
    st.subheader(question.question)

    if isinstance(question, ChoiceQuestion):
        _render_choice_options(quiz, question)
    else:
        _render_code_editor(quiz, language)

    if quiz.feedback_visible:
        _render_feedback(quiz)
        label = "Finish Quiz" if quiz.is_last_question else "Next Question"
        st.button(label, on_click=quiz.advance, type="primary")
        return

    is_choice = isinstance(question, ChoiceQuestion)
    if st.button(
        "Submit Answer",
        type="primary",
        disabled=quiz.is_evaluating or (is_choice and quiz.selected_option is None),
    ):
        if is_choice:
            accepted = quiz.submit()
        else:
            with st.spinner("Evaluating your code..."):
                accepted = quiz.submit()
        if accepted:
            st.rerun()
        # Blank code is refused without touching the score
        st.warning("Write some code before submitting.")


# ----------------------------------------------------------------------
#  Layout sections
# ----------------------------------------------------------------------
def render_input_panel(shell: AppShell) -> None:
    st.markdown("### Input Your Code")
    source = st.text_area(
        "Input Your Code",
        key="source_code",
        height=400,
        placeholder="Paste your function, class, or logic here... (e.g. a Python sorting algorithm)",
        label_visibility="collapsed",
        disabled=not shell.can_generate,
    )
    shell.set_source(source)

    loading = shell.state.status == AppStatus.LOADING
    label = "Generating Learning Module..." if loading else "Generate Tutorial & Quiz"
    if st.button(label, type="primary", disabled=loading, use_container_width=True):
        if shell.begin_generation():
            st.rerun()

    if shell.state.error:
        st.error(shell.state.error)

    with st.container(border=True):
        st.markdown("**TIPS**")
        st.markdown(TIPS)


def _on_clear(shell: AppShell) -> None:
    shell.clear()
    _clear_code_widgets()


def render_module(shell: AppShell) -> None:
    module = shell.state.module
    quiz = shell.state.quiz

    badge_col, clear_col = st.columns([4, 1])
    with badge_col:
        st.markdown(f"🟢 **{module.language.upper()} MODULE**")
    with clear_col:
        st.button("Clear All", on_click=_on_clear, args=(shell,))

    tabs = list(ContentTab)
    selected = st.radio(
        "Section",
        tabs,
        index=tabs.index(shell.state.active_tab),
        format_func=lambda t: t.label,
        horizontal=True,
        label_visibility="collapsed",
    )
    shell.select_tab(selected)

    if shell.state.active_tab == ContentTab.QUIZ:
        render_quiz(quiz, module.language)
    else:
        render_content(module.content_for(shell.state.active_tab))


def render_result_panel(shell: AppShell) -> None:
    status = shell.state.status

    if status == AppStatus.LOADING:
        with st.spinner("Generating learning module..."):
            shell.finish_generation()
        _clear_code_widgets()
        st.rerun()

    if status == AppStatus.SUCCESS and shell.state.module is not None:
        render_module(shell)
        return

    # Idle, or an error with nothing loaded
    with st.container(border=True):
        st.markdown("### Ready to Learn?")
        st.write(
            'Paste a code snippet on the left and hit "Generate" to transform it '
            "into an interactive learning experience."
        )


# ----------------------------------------------------------------------
#  Main
# ----------------------------------------------------------------------
def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🧠",
        layout="wide",
    )

    st.title(APP_TITLE)
    st.caption(f"Powered by {settings.model_name}")

    shell = get_shell()

    input_col, result_col = st.columns([5, 7], gap="large")
    with input_col:
        render_input_panel(shell)
    with result_col:
        render_result_panel(shell)
