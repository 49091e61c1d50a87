"""HTML code generator for rich-text documents."""

from typing import List

from vitae.contexts.richtext.ast import Mark
from vitae.contexts.richtext.codegen.base import CodeGenerator
from vitae.utils.escaping import escape_html


class HtmlCodeGenerator(CodeGenerator):
    """Emits HTML fragments (<p>, <ul>/<ol>/<li>, <strong>, <em>, <u>, <a>)."""

    engine = "html"
    empty_paragraph = "<p></p>"

    def escape(self, text: str) -> str:
        return escape_html(text)

    def paragraph(self, content: str) -> str:
        return f"<p>{content}</p>"

    def bullet_list(self, items: List[str]) -> str:
        return "<ul>" + "".join(items) + "</ul>"

    def ordered_list(self, items: List[str], start: int) -> str:
        start_attr = f' start="{start}"' if start != 1 else ""
        return f"<ol{start_attr}>" + "".join(items) + "</ol>"

    def list_item(self, content: str) -> str:
        return f"<li>{content}</li>"

    def bold(self, text: str) -> str:
        return f"<strong>{text}</strong>"

    def italic(self, text: str) -> str:
        return f"<em>{text}</em>"

    def underline(self, text: str) -> str:
        return f"<u>{text}</u>"

    def link(self, text: str, mark: Mark) -> str:
        href = escape_html(mark.href or "#")
        target = f' target="{escape_html(mark.target)}"' if mark.target else ""
        css_class = f' class="{escape_html(mark.css_class)}"' if mark.css_class else ""
        return f'<a href="{href}"{target}{css_class}>{text}</a>'
