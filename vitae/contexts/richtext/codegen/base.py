"""
Code Generator Base

Walks a rich-text document tree and emits markup for one output grammar.
Subclasses supply the grammar's constructs; traversal, escaping order and
mark application order are shared here so every engine behaves the same way.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List

from vitae.contexts.richtext.ast import Mark, MarkType, Node, NodeType

# Dispatch tables: every NodeType and MarkType must appear here
NODE_HANDLERS: Dict[NodeType, str] = {
    NodeType.DOC: "_generate_doc",
    NodeType.PARAGRAPH: "_generate_paragraph",
    NodeType.BULLET_LIST: "_generate_bullet_list",
    NodeType.ORDERED_LIST: "_generate_ordered_list",
    NodeType.LIST_ITEM: "_generate_list_item",
    NodeType.TEXT: "_generate_text",
}

MARK_HANDLERS: Dict[MarkType, str] = {
    MarkType.BOLD: "bold",
    MarkType.ITALIC: "italic",
    MarkType.UNDERLINE: "underline",
    MarkType.LINK: "link",
}


class CodeGenerator(ABC):
    """
    Abstract rich-text code generator.

    generate() is pure and total over the node union: the same tree always
    yields the same string, and an empty doc yields "".
    """

    #: Engine name this generator targets
    engine: str = ""

    #: Output for a paragraph with no content
    empty_paragraph: str = ""

    def generate(self, node: Node) -> str:
        """
        Generate target markup for a node and its descendants.

        Args:
            node: Any node of a document tree

        Returns:
            Markup string
        """
        handler: Callable[[Node], str] = getattr(self, NODE_HANDLERS[node.type])
        return handler(node)

    def _generate_children(self, node: Node) -> str:
        return "".join(self.generate(child) for child in node.content)

    def _generate_doc(self, node: Node) -> str:
        return self._generate_children(node)

    def _generate_paragraph(self, node: Node) -> str:
        if node.is_empty:
            return self.empty_paragraph
        return self.paragraph(self._generate_children(node))

    def _generate_bullet_list(self, node: Node) -> str:
        return self.bullet_list([self.generate(item) for item in node.content])

    def _generate_ordered_list(self, node: Node) -> str:
        return self.ordered_list([self.generate(item) for item in node.content], node.start)

    def _generate_list_item(self, node: Node) -> str:
        content = self._generate_children(node)
        # Keep the first paragraph of an item tight against whatever follows it
        if "\n\n" in content:
            content = content.replace("\n\n", "\n", 1)
        return self.list_item(content)

    def _generate_text(self, node: Node) -> str:
        result = self.escape(node.text)
        for mark in node.marks:
            result = self.apply_mark(result, mark)
        return result

    def apply_mark(self, text: str, mark: Mark) -> str:
        """Wrap already-escaped text in the construct for one mark."""
        handler = getattr(self, MARK_HANDLERS[mark.type])
        if mark.type == MarkType.LINK:
            return handler(text, mark)
        return handler(text)

    # Grammar-specific constructs

    @abstractmethod
    def escape(self, text: str) -> str:
        """Escape raw text for the target grammar."""

    @abstractmethod
    def paragraph(self, content: str) -> str:
        """Wrap non-empty inline content as a paragraph."""

    @abstractmethod
    def bullet_list(self, items: List[str]) -> str:
        """Wrap rendered list items as an unordered list."""

    @abstractmethod
    def ordered_list(self, items: List[str], start: int) -> str:
        """Wrap rendered list items as an ordered list."""

    @abstractmethod
    def list_item(self, content: str) -> str:
        """Wrap rendered item content as a list item."""

    @abstractmethod
    def bold(self, text: str) -> str:
        pass

    @abstractmethod
    def italic(self, text: str) -> str:
        pass

    @abstractmethod
    def underline(self, text: str) -> str:
        pass

    @abstractmethod
    def link(self, text: str, mark: Mark) -> str:
        pass
