"""Markdown code generator for rich-text documents."""

from typing import List

from vitae.contexts.richtext.ast import Mark
from vitae.contexts.richtext.codegen.base import CodeGenerator
from vitae.utils.escaping import escape_markdown


def _indent_continuation(content: str, width: int) -> str:
    """Indent every line after the first so it stays inside its list item."""
    lines = content.split("\n")
    indent = " " * width
    return "\n".join([lines[0]] + [f"{indent}{line}" if line else line for line in lines[1:]])


class MarkdownCodeGenerator(CodeGenerator):
    """
    Emits CommonMark: "- " and "N. " list markers, **bold**, *italic*,
    <u>underline</u> and [text](url) links.
    """

    engine = "markdown"
    empty_paragraph = "\n"

    def escape(self, text: str) -> str:
        return escape_markdown(text)

    def paragraph(self, content: str) -> str:
        return f"{content}\n\n"

    def bullet_list(self, items: List[str]) -> str:
        return "".join(f"- {_indent_continuation(item, 2)}\n" for item in items) + "\n"

    def ordered_list(self, items: List[str], start: int) -> str:
        rendered = []
        for number, item in enumerate(items, start):
            marker = f"{number}. "
            rendered.append(f"{marker}{_indent_continuation(item, len(marker))}\n")
        return "".join(rendered) + "\n"

    def list_item(self, content: str) -> str:
        # Markers are added by the enclosing list, which knows the numbering
        return content.rstrip("\n")

    def bold(self, text: str) -> str:
        return f"**{text}**"

    def italic(self, text: str) -> str:
        return f"*{text}*"

    def underline(self, text: str) -> str:
        return f"<u>{text}</u>"

    def link(self, text: str, mark: Mark) -> str:
        return f"[{text}]({mark.href})"
