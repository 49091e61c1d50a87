"""
Shared utilities for VITAE.

Common functionality used across contexts:
- Escaping for each output grammar
- Text joining and blank-line normalization
- Logging setup
"""

from vitae.utils.escaping import (
    escape_html,
    escape_latex,
    escape_latex_url,
    escape_markdown,
    get_escaper,
)
from vitae.utils.text_processing import (
    is_empty_value,
    join_non_empty,
    replace_blank_lines_with_percent,
    set_max_consecutive_blank_lines,
    show_if,
    show_if_not_empty,
)

__all__ = [
    "escape_html",
    "escape_latex",
    "escape_latex_url",
    "escape_markdown",
    "get_escaper",
    "is_empty_value",
    "join_non_empty",
    "replace_blank_lines_with_percent",
    "set_max_consecutive_blank_lines",
    "show_if",
    "show_if_not_empty",
]
