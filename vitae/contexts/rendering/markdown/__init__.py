"""Markdown renderers."""

from vitae.contexts.rendering.markdown.renderer import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
