"""
Markdown Summary Parser

Reads Markdown summary text into the same document tree as the stored JSON
format, so plain-text and Markdown summaries render through the same code
generators.

Only constructs the tree can express survive as structure: paragraphs, bullet
and ordered lists, bold, italic and links. Headings become paragraphs, block
quotes are unwrapped, and code keeps its text without formatting.
"""

from typing import Iterable, List, Tuple

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from vitae.contexts.richtext.ast import Mark, MarkType, Node, NodeType

_parser = MarkdownIt("commonmark")

# markdown-it inline node type -> mark it applies to its children
INLINE_MARKS = {
    "strong": MarkType.BOLD,
    "em": MarkType.ITALIC,
}

# Inline node types whose content is kept as plain text
TEXT_NODES = ("text", "code_inline", "html_inline")

# Line breaks inside a paragraph
BREAK_NODES = ("softbreak", "hardbreak")


def parse_markdown(source: str) -> Node:
    """
    Parse Markdown text into a document tree.

    Args:
        source: Markdown text (plain text is a single paragraph)

    Returns:
        Root "doc" node

    Example:
        >>> parse_markdown("Built **vitae**").to_dict()["content"][0]["content"][1]
        {'type': 'text', 'text': 'vitae', 'marks': [{'type': 'bold'}]}
    """
    root = SyntaxTreeNode(_parser.parse(source))
    return Node(type=NodeType.DOC, content=tuple(_convert_blocks(root.children)))


def _convert_blocks(nodes: Iterable[SyntaxTreeNode]) -> List[Node]:
    blocks: List[Node] = []

    for node in nodes:
        if node.type in ("paragraph", "heading"):
            blocks.append(Node(type=NodeType.PARAGRAPH, content=tuple(_convert_inlines(node.children))))
        elif node.type == "bullet_list":
            blocks.append(Node(type=NodeType.BULLET_LIST, content=tuple(_convert_items(node))))
        elif node.type == "ordered_list":
            blocks.append(
                Node(
                    type=NodeType.ORDERED_LIST,
                    content=tuple(_convert_items(node)),
                    start=int(node.attrs.get("start", 1)),
                )
            )
        elif node.type == "blockquote":
            blocks.extend(_convert_blocks(node.children))
        elif node.type in ("code_block", "fence"):
            code = node.content.rstrip("\n")
            if code:
                blocks.append(Node(type=NodeType.PARAGRAPH, content=(_text(code, ()),)))

    return blocks


def _convert_items(list_node: SyntaxTreeNode) -> List[Node]:
    return [
        Node(type=NodeType.LIST_ITEM, content=tuple(_convert_blocks(item.children)))
        for item in list_node.children
    ]


def _convert_inlines(nodes: Iterable[SyntaxTreeNode], marks: Tuple[Mark, ...] = ()) -> List[Node]:
    """Flatten inline nodes into text nodes, outer marks first."""
    result: List[Node] = []

    for node in nodes:
        if node.type == "inline":
            result.extend(_convert_inlines(node.children, marks))
        elif node.type in TEXT_NODES:
            if node.content:
                result.append(_text(node.content, marks))
        elif node.type in BREAK_NODES:
            result.append(_text("\n", marks))
        elif node.type in INLINE_MARKS:
            result.extend(_convert_inlines(node.children, marks + (Mark(type=INLINE_MARKS[node.type]),)))
        elif node.type == "link":
            link = Mark(type=MarkType.LINK, href=str(node.attrs.get("href", "")))
            result.extend(_convert_inlines(node.children, marks + (link,)))
        elif node.type == "image":
            # Alt text only
            result.extend(_convert_inlines(node.children, marks))

    return result


def _text(value: str, marks: Tuple[Mark, ...]) -> Node:
    return Node(type=NodeType.TEXT, text=value, marks=marks)
