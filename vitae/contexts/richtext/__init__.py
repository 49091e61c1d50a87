"""
Richtext Context

Responsibilities:
- Reads stored rich-text documents (summary fields) into an immutable node tree
- Generates LaTeX, HTML or Markdown from a node tree with per-grammar escaping

Owns: Document tree types, stored-format parsing, code generation
Never: Decides where generated markup is placed in a resume
"""

from vitae.contexts.richtext.ast import Mark, MarkType, Node, NodeType
from vitae.contexts.richtext.codegen import (
    CodeGenerator,
    HtmlCodeGenerator,
    LatexCodeGenerator,
    MarkdownCodeGenerator,
    get_code_generator,
)
from vitae.contexts.richtext.exceptions import (
    MalformedDocumentError,
    RichTextError,
    UnknownMarkTypeError,
    UnknownNodeTypeError,
)
from vitae.contexts.richtext.markdown import parse_markdown
from vitae.contexts.richtext.parser import parse_document, parse_document_or_none, parse_summary

__all__ = [
    # Tree types
    "Mark",
    "MarkType",
    "Node",
    "NodeType",
    # Parsing
    "parse_document",
    "parse_document_or_none",
    "parse_markdown",
    "parse_summary",
    # Code generation
    "CodeGenerator",
    "HtmlCodeGenerator",
    "LatexCodeGenerator",
    "MarkdownCodeGenerator",
    "get_code_generator",
    # Errors
    "MalformedDocumentError",
    "RichTextError",
    "UnknownMarkTypeError",
    "UnknownNodeTypeError",
]
