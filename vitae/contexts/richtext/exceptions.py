"""Custom exceptions for the richtext context."""

from typing import Any, Optional


class RichTextError(ValueError):
    """Base class for rich-text document errors."""

    pass


class UnknownNodeTypeError(RichTextError):
    """
    Exception raised when a stored document contains a node tag outside the known set.

    Attributes:
        node_type: The unrecognized tag
    """

    def __init__(self, node_type: Any):
        self.node_type = node_type
        super().__init__(f"Unknown rich-text node type: {node_type!r}")


class UnknownMarkTypeError(RichTextError):
    """
    Exception raised when a text node carries a mark tag outside the known set.

    Attributes:
        mark_type: The unrecognized tag
    """

    def __init__(self, mark_type: Any):
        self.mark_type = mark_type
        super().__init__(f"Unknown rich-text mark type: {mark_type!r}")


class MalformedDocumentError(RichTextError):
    """
    Exception raised when a stored document cannot be read as a document tree.

    Attributes:
        message: Error description
        original_error: The underlying decoding error, if any
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error

        parts = [message]
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
