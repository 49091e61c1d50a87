"""
Rich-text code generators, one per output engine.
"""

from typing import Dict, Type

from vitae.contexts.richtext.codegen.base import MARK_HANDLERS, NODE_HANDLERS, CodeGenerator
from vitae.contexts.richtext.codegen.html import HtmlCodeGenerator
from vitae.contexts.richtext.codegen.latex import LatexCodeGenerator
from vitae.contexts.richtext.codegen.markdown import MarkdownCodeGenerator

CODE_GENERATORS: Dict[str, Type[CodeGenerator]] = {
    "latex": LatexCodeGenerator,
    "html": HtmlCodeGenerator,
    "markdown": MarkdownCodeGenerator,
}


def get_code_generator(engine: str, underline_links: bool = False) -> CodeGenerator:
    """
    Create the code generator for an output engine.

    Args:
        engine: Engine name ("latex", "html" or "markdown")
        underline_links: Underline link text (LaTeX only)

    Returns:
        CodeGenerator instance

    Raises:
        ValueError: If the engine has no code generator
    """
    if engine not in CODE_GENERATORS:
        available = ", ".join(sorted(CODE_GENERATORS))
        raise ValueError(f"No code generator for engine '{engine}'. Available: {available}")

    if engine == "latex":
        return LatexCodeGenerator(underline_links=underline_links)
    return CODE_GENERATORS[engine]()


__all__ = [
    "CODE_GENERATORS",
    "MARK_HANDLERS",
    "NODE_HANDLERS",
    "CodeGenerator",
    "HtmlCodeGenerator",
    "LatexCodeGenerator",
    "MarkdownCodeGenerator",
    "get_code_generator",
]
