"""
Text Processing Utilities

Helpers for conditionally composing output fragments and normalizing blank lines.
"""

import re
from typing import Any, Iterable


def is_empty_value(value: Any) -> bool:
    """
    Check whether a value carries no displayable content.

    None, whitespace-only strings and empty collections are all empty.

    Args:
        value: Any field value from a resume

    Returns:
        True if the value is empty, False otherwise
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict, set)):
        return len(value) == 0
    return False


def show_if(predicate: bool, content: str) -> str:
    """Return content if predicate holds, otherwise an empty string."""
    return content if predicate else ""


def show_if_not_empty(value: Any, content: str) -> str:
    """Return content if value is not empty, otherwise an empty string."""
    return show_if(not is_empty_value(value), content)


def join_non_empty(parts: Iterable[str], separator: str = "\n\n") -> str:
    """
    Join fragments, skipping any that are empty or whitespace-only.

    Args:
        parts: Output fragments
        separator: String placed between kept fragments (default: one blank line)

    Returns:
        Joined string without dangling separators

    Example:
        >>> join_non_empty(["Master", "", "Physics"], ", ")
        'Master, Physics'
    """
    return separator.join(part for part in parts if not is_empty_value(part))


def set_max_consecutive_blank_lines(content: str, max_consecutive: int = 1) -> str:
    """
    Normalize consecutive blank lines to a maximum number.

    Args:
        content: The text content to normalize
        max_consecutive: Maximum number of consecutive blank lines to allow.
                        Use 0 to remove all blank lines, 1 for standard
                        normalization (default: 1)

    Returns:
        Content with normalized blank lines

    Example:
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=1)
        'text\\n\\nmore'
        >>> set_max_consecutive_blank_lines("text\\n\\n\\n\\nmore", max_consecutive=0)
        'text\\nmore'
    """
    if max_consecutive == 0:
        # Any run of one or more blank lines
        pattern = r"\n[ \t]*\n(?:[ \t]*\n)*"
    else:
        # Runs of two or more blank lines only
        pattern = r"\n[ \t]*\n(?:[ \t]*\n)+"

    # max_consecutive=1 means "\n\n", one blank line
    replacement = "\n" * (max_consecutive + 1)

    return re.sub(pattern, replacement, content)


def replace_blank_lines_with_percent(content: str) -> str:
    """
    Replace every blank line with a lone LaTeX comment marker.

    Some LaTeX macro arguments (moderncv's \\cventry among them) do not accept
    paragraph breaks; a "%" line keeps the visual line break in the source
    without ending the paragraph.

    Args:
        content: LaTeX fragment

    Returns:
        Fragment with blank lines turned into "%" lines. A fragment that is
        nothing but a single newline becomes an empty string.

    Example:
        >>> replace_blank_lines_with_percent("First\\n\\nSecond")
        'First\\n%\\nSecond'
    """
    if content == "\n":
        return ""

    return re.sub(r"^[ \t]*\n", "%\n", content, flags=re.MULTILINE)
