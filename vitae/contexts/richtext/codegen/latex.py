"""LaTeX code generator for rich-text documents."""

from typing import List

from vitae.contexts.richtext.ast import Mark
from vitae.contexts.richtext.codegen.base import CodeGenerator
from vitae.utils.escaping import escape_latex, escape_latex_url


class LatexCodeGenerator(CodeGenerator):
    """
    Emits LaTeX using itemize/enumerate lists and \\textbf, \\textit,
    \\underline and \\href for marks.

    Args:
        underline_links: Wrap link text in \\underline (layout option
                         typography.links.underline)
    """

    engine = "latex"
    empty_paragraph = "\n"

    def __init__(self, underline_links: bool = False):
        self.underline_links = underline_links

    def escape(self, text: str) -> str:
        return escape_latex(text)

    def paragraph(self, content: str) -> str:
        # A blank line is what ends a paragraph in LaTeX
        return f"{content}\n\n"

    def bullet_list(self, items: List[str]) -> str:
        return "\\begin{itemize}\n" + "".join(items) + "\\end{itemize}\n"

    def ordered_list(self, items: List[str], start: int) -> str:
        counter = f"\\setcounter{{enumi}}{{{start - 1}}}\n" if start != 1 else ""
        return "\\begin{enumerate}\n" + counter + "".join(items) + "\\end{enumerate}\n"

    def list_item(self, content: str) -> str:
        return f"\\item {content}"

    def bold(self, text: str) -> str:
        return f"\\textbf{{{text}}}"

    def italic(self, text: str) -> str:
        return f"\\textit{{{text}}}"

    def underline(self, text: str) -> str:
        return f"\\underline{{{text}}}"

    def link(self, text: str, mark: Mark) -> str:
        if self.underline_links:
            text = self.underline(text)
        return f"\\href{{{escape_latex_url(mark.href)}}}{{{text}}}"
