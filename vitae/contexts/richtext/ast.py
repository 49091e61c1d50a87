"""
Rich-Text Document Tree

Immutable node and mark types for the stored rich-text format used by resume
summary fields. The tree is built once from its stored dict form and only read
afterwards; it has no parent references.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from vitae.contexts.richtext.exceptions import UnknownMarkTypeError, UnknownNodeTypeError


class NodeType(str, Enum):
    """Tags of the document tree node union."""

    DOC = "doc"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bulletList"
    ORDERED_LIST = "orderedList"
    LIST_ITEM = "listItem"
    TEXT = "text"


class MarkType(str, Enum):
    """Tags of the inline mark union."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    LINK = "link"


@dataclass(frozen=True)
class Mark:
    """
    Inline formatting applied to a text node.

    Attributes:
        type: Mark tag
        href: Link target (link marks only)
        target: Optional link target frame (link marks only)
        css_class: Optional CSS class (link marks only)
    """

    type: MarkType
    href: str = ""
    target: Optional[str] = None
    css_class: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Mark":
        """
        Build a mark from its stored form.

        Raises:
            UnknownMarkTypeError: If the tag is not a known mark
        """
        tag = data.get("type")
        try:
            mark_type = MarkType(tag)
        except ValueError as e:
            raise UnknownMarkTypeError(tag) from e

        attrs = data.get("attrs") or {}
        return cls(
            type=mark_type,
            href=attrs.get("href") or "",
            target=attrs.get("target"),
            css_class=attrs.get("class"),
        )


@dataclass(frozen=True)
class Node:
    """
    One node of a rich-text document tree.

    Attributes:
        type: Node tag
        content: Child nodes (doc, paragraph, lists and list items)
        text: Raw text (text nodes only)
        marks: Marks in application order (text nodes only)
        start: First item number (ordered lists only)
    """

    type: NodeType
    content: Tuple["Node", ...] = ()
    text: str = ""
    marks: Tuple[Mark, ...] = ()
    start: int = 1

    @property
    def is_empty(self) -> bool:
        return len(self.content) == 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Node":
        """
        Recursively build a node tree from its stored dict form.

        Args:
            data: Mapping with a "type" tag plus "content", "text", "marks"
                  and "attrs" as the tag requires

        Returns:
            Root node of the built tree

        Raises:
            UnknownNodeTypeError: If any node tag is not known
            UnknownMarkTypeError: If any mark tag is not known
        """
        tag = data.get("type")
        try:
            node_type = NodeType(tag)
        except ValueError as e:
            raise UnknownNodeTypeError(tag) from e

        children = tuple(cls.from_dict(child) for child in data.get("content") or [])
        marks = tuple(Mark.from_dict(mark) for mark in data.get("marks") or [])
        attrs = data.get("attrs") or {}

        return cls(
            type=node_type,
            content=children,
            text=data.get("text") or "",
            marks=marks,
            start=int(attrs.get("start") or 1),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the stored dict form."""
        result: Dict[str, Any] = {"type": self.type.value}

        if self.type == NodeType.TEXT:
            result["text"] = self.text
            if self.marks:
                result["marks"] = [_mark_to_dict(mark) for mark in self.marks]
        elif self.content:
            result["content"] = [child.to_dict() for child in self.content]

        if self.type == NodeType.ORDERED_LIST and self.start != 1:
            result["attrs"] = {"start": self.start}

        return result


def _mark_to_dict(mark: Mark) -> Dict[str, Any]:
    if mark.type != MarkType.LINK:
        return {"type": mark.type.value}

    attrs: Dict[str, Any] = {"href": mark.href, "target": mark.target, "class": mark.css_class}
    return {"type": mark.type.value, "attrs": attrs}


# Convenience constructors, mostly for building documents in code and tests


def text(value: str, marks: List[Mark] = None) -> Node:
    return Node(type=NodeType.TEXT, text=value, marks=tuple(marks or []))


def paragraph(*children: Node) -> Node:
    return Node(type=NodeType.PARAGRAPH, content=children)


def bullet_list(*items: Node) -> Node:
    return Node(type=NodeType.BULLET_LIST, content=items)


def ordered_list(*items: Node, start: int = 1) -> Node:
    return Node(type=NodeType.ORDERED_LIST, content=items, start=start)


def list_item(*children: Node) -> Node:
    return Node(type=NodeType.LIST_ITEM, content=children)


def doc(*children: Node) -> Node:
    return Node(type=NodeType.DOC, content=children)
