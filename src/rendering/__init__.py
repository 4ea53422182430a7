"""Rendering of generated Markdown content."""

from .markdown import CodeBlock, ContentBlock, ProseBlock, format_prose, render_blocks

__all__ = ["render_blocks", "format_prose", "ProseBlock", "CodeBlock", "ContentBlock"]
