"""
Escaping Utilities

Escape plain text so it can be embedded verbatim in each output grammar.
Every escaper accepts None or an empty string and returns an empty string.
"""

import re
from typing import Callable, Dict, Optional

from markupsafe import escape

# Characters reserved by LaTeX and their literal-text replacements
LATEX_SPECIAL_CHARACTERS = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "^": r"\textasciicircum{}",
    "_": r"\_",
    "~": r"\textasciitilde{}",
}

# Single pass, so replacements such as \textbackslash{} are never re-escaped
_LATEX_SPECIAL_PATTERN = re.compile("|".join(re.escape(char) for char in LATEX_SPECIAL_CHARACTERS))

# Characters that would otherwise start Markdown emphasis, code, links, images, tables or raw HTML
_MARKDOWN_SPECIAL_PATTERN = re.compile(r"([\\`*_\[\]<>|!])")

# Block markers at the start of a line, e.g. "# x", "- x", "+ x" or "---"
_MARKDOWN_BLOCK_MARKER_PATTERN = re.compile(r"^([ \t]*)(?=#{1,6}(?:[ \t]|$)|[-+](?:[ \t]|$)|[-=]+[ \t]*$)", re.M)

# Line-start ordered list markers ("1. x", "2) x")
_MARKDOWN_ORDERED_MARKER_PATTERN = re.compile(r"^([ \t]*\d{1,9})(?=[.)](?:[ \t]|$))", re.M)


def escape_latex(text: Optional[str]) -> str:
    """
    Escape LaTeX special characters in plain text.

    Args:
        text: Raw text, may be None or empty

    Returns:
        Text safe to place in a LaTeX document body

    Example:
        >>> escape_latex("R&D at 50% _scale_")
        'R\\\\&D at 50\\\\% \\\\_scale\\\\_'
    """
    if not text:
        return ""

    return _LATEX_SPECIAL_PATTERN.sub(lambda match: LATEX_SPECIAL_CHARACTERS[match.group(0)], text)


def escape_html(text: Optional[str]) -> str:
    """Escape &, <, >, double and single quotes for HTML text and attributes."""
    if not text:
        return ""

    return str(escape(text))


def escape_markdown(text: Optional[str]) -> str:
    """Backslash-escape characters that Markdown would interpret as markup."""
    if not text:
        return ""

    escaped = _MARKDOWN_SPECIAL_PATTERN.sub(r"\\\1", text)
    escaped = _MARKDOWN_BLOCK_MARKER_PATTERN.sub(r"\1\\", escaped)
    return _MARKDOWN_ORDERED_MARKER_PATTERN.sub(r"\1\\", escaped)


ESCAPERS: Dict[str, Callable[[Optional[str]], str]] = {
    "latex": escape_latex,
    "html": escape_html,
    "markdown": escape_markdown,
}


def get_escaper(engine: str) -> Callable[[Optional[str]], str]:
    """
    Get the escaping function for an output engine.

    Args:
        engine: Engine name ("latex", "html" or "markdown")

    Returns:
        Escaping function for that engine's grammar

    Raises:
        ValueError: If the engine has no registered escaper
    """
    if engine not in ESCAPERS:
        available = ", ".join(sorted(ESCAPERS))
        raise ValueError(f"No escaper for engine '{engine}'. Available: {available}")

    return ESCAPERS[engine]


def escape_latex_url(url: Optional[str]) -> str:
    """
    Escape a URL for the first argument of \\href.

    hyperref reads the URL almost verbatim, but "%" and "#" would still end or
    break the argument when \\href sits inside another macro's argument.
    """
    if not url:
        return ""

    return url.replace("%", r"\%").replace("#", r"\#")
