"""
Rich-Text Document Parser

Reads the stored rich-text format (a JSON string or an already-decoded mapping)
or Markdown summary text into a document tree.
"""

import json
from typing import Any, Mapping, Optional, Union

from vitae.contexts.richtext.ast import Node, NodeType
from vitae.contexts.richtext.exceptions import MalformedDocumentError
from vitae.contexts.richtext.markdown import parse_markdown

StoredDocument = Union[str, Mapping[str, Any]]


def parse_document(stored: StoredDocument) -> Node:
    """
    Parse a stored rich-text document into a tree.

    Args:
        stored: JSON string or mapping whose root is a "doc" node

    Returns:
        Root "doc" node

    Raises:
        MalformedDocumentError: If the input is not valid JSON, not an object,
            or its root is not a "doc" node
        UnknownNodeTypeError: If a node tag inside the document is not known
        UnknownMarkTypeError: If a mark tag inside the document is not known
    """
    if isinstance(stored, str):
        try:
            data = json.loads(stored)
        except json.JSONDecodeError as e:
            raise MalformedDocumentError("Rich-text document is not valid JSON", e) from e
    else:
        data = stored

    if not isinstance(data, Mapping):
        raise MalformedDocumentError(
            f"Rich-text document must be an object, got {type(data).__name__}"
        )

    if data.get("type") != NodeType.DOC.value:
        raise MalformedDocumentError(
            f"Rich-text document root must be a 'doc' node, got {data.get('type')!r}"
        )

    return Node.from_dict(data)


def parse_document_or_none(stored: Optional[StoredDocument]) -> Optional[Node]:
    """
    Parse a stored document, treating empty or malformed input as absent.

    Unknown node or mark tags still raise: those indicate a document written
    by an incompatible editor rather than a missing value.

    Args:
        stored: JSON string, mapping, None or empty string

    Returns:
        Root "doc" node, or None
    """
    if stored is None or (isinstance(stored, str) and not stored.strip()):
        return None

    try:
        return parse_document(stored)
    except MalformedDocumentError:
        return None


def parse_summary(stored: Optional[StoredDocument]) -> Optional[Node]:
    """
    Parse a summary field, which is either a stored document or Markdown text.

    Mappings and JSON objects carrying a "type" key go through the stored
    format; any other string is read as Markdown.

    Args:
        stored: Mapping, JSON string, Markdown string, None or empty string

    Returns:
        Root "doc" node, or None for empty or malformed stored input
    """
    if isinstance(stored, str) and stored.strip() and not _is_stored_document(stored):
        return parse_markdown(stored)

    return parse_document_or_none(stored)


def _is_stored_document(value: str) -> bool:
    try:
        data = json.loads(value)
    except json.JSONDecodeError:
        return False
    return isinstance(data, Mapping) and "type" in data
