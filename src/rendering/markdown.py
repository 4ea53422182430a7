"""Lightweight Markdown renderer for generated module content."""

import html
import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

DEFAULT_CODE_LABEL = "code"

# An unterminated fence runs to the end of the text.
FENCE_PATTERN = re.compile(
    r"```(?:(?P<lang>[\w+#.-]+)[ \t]*\n|\n?)(?P<body>[\s\S]*?)(?:```|\Z)"
)

# Applied in order: headings and bullets first so bold inside them still resolves.
PROSE_SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^\* (.*)$", re.MULTILINE), r"<li>\1</li>"),
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\n"), "<br />"),
]


class ProseBlock(BaseModel):
    """Formatted text rendered as HTML."""

    kind: Literal["prose"] = "prose"
    html: str

    model_config = {"frozen": True}


class CodeBlock(BaseModel):
    """A fenced code block rendered verbatim."""

    kind: Literal["code"] = "code"
    language: str = DEFAULT_CODE_LABEL
    code: str

    model_config = {"frozen": True}


ContentBlock = Annotated[Union[ProseBlock, CodeBlock], Field(discriminator="kind")]


def format_prose(text: str) -> str:
    """
    Convert a non-code segment to HTML.

    Line endings are normalised and the text escaped first, then headings,
    bullets, bold spans and line breaks are substituted in that order.

    Args:
        text: Markdown-ish text with no code fences

    Returns:
        HTML fragment
    """
    formatted = html.escape(text.replace("\r\n", "\n"), quote=False)
    for pattern, replacement in PROSE_SUBSTITUTIONS:
        formatted = pattern.sub(replacement, formatted)
    return formatted


def render_blocks(text: str) -> list[ContentBlock]:
    """
    Split content into prose and code blocks, left to right.

    Args:
        text: Generated module content

    Returns:
        Display blocks in source order
    """
    text = text.replace("\r\n", "\n")
    blocks: list[ContentBlock] = []
    position = 0

    for match in FENCE_PATTERN.finditer(text):
        prose = text[position : match.start()]
        if prose.strip():
            blocks.append(ProseBlock(html=format_prose(prose)))

        blocks.append(
            CodeBlock(
                language=match.group("lang") or DEFAULT_CODE_LABEL,
                code=match.group("body").strip(),
            )
        )
        position = match.end()

    tail = text[position:]
    if tail.strip():
        blocks.append(ProseBlock(html=format_prose(tail)))

    return blocks
