"""Unit tests for reading Markdown summaries into document trees."""

import pytest

from vitae.contexts.richtext import Mark, MarkType, NodeType, parse_markdown, parse_summary
from vitae.contexts.richtext.ast import bullet_list, doc, list_item, ordered_list, paragraph, text

BOLD = Mark(type=MarkType.BOLD)
ITALIC = Mark(type=MarkType.ITALIC)


class TestParseMarkdown:
    """Test the Markdown constructs a summary can carry."""

    @pytest.mark.unit
    def test_plain_text_is_one_paragraph(self):
        assert parse_markdown("Mathematician and writer") == doc(paragraph(text("Mathematician and writer")))

    @pytest.mark.unit
    def test_paragraphs(self):
        root = parse_markdown("First\n\nSecond")
        assert root == doc(paragraph(text("First")), paragraph(text("Second")))

    @pytest.mark.unit
    def test_bold_and_italic(self):
        root = parse_markdown("Hello **world** and *you*")

        assert root == doc(
            paragraph(
                text("Hello "),
                text("world", [BOLD]),
                text(" and "),
                text("you", [ITALIC]),
            )
        )

    @pytest.mark.unit
    def test_nested_marks_outer_first(self):
        root = parse_markdown("***both***")
        marks = root.content[0].content[0].marks

        assert {mark.type for mark in marks} == {MarkType.BOLD, MarkType.ITALIC}
        assert len(marks) == 2

    @pytest.mark.unit
    def test_link(self):
        root = parse_markdown("See [my **site**](https://ada.example.com)")
        label, bold_label = root.content[0].content[1:]

        assert label.text == "my "
        assert label.marks == (Mark(type=MarkType.LINK, href="https://ada.example.com"),)
        assert bold_label.text == "site"
        assert [mark.type for mark in bold_label.marks] == [MarkType.LINK, MarkType.BOLD]

    @pytest.mark.unit
    def test_bullet_list(self):
        root = parse_markdown("- One\n- Two")

        assert root == doc(
            bullet_list(
                list_item(paragraph(text("One"))),
                list_item(paragraph(text("Two"))),
            )
        )

    @pytest.mark.unit
    def test_ordered_list_start(self):
        root = parse_markdown("3. Three\n4. Four")

        assert root == doc(
            ordered_list(
                list_item(paragraph(text("Three"))),
                list_item(paragraph(text("Four"))),
                start=3,
            )
        )

    @pytest.mark.unit
    def test_ordered_list_defaults_to_one(self):
        assert parse_markdown("1. One").content[0].start == 1

    @pytest.mark.unit
    def test_heading_becomes_paragraph(self):
        assert parse_markdown("## Profile") == doc(paragraph(text("Profile")))

    @pytest.mark.unit
    def test_line_break_kept_as_newline(self):
        root = parse_markdown("line one\nline two")
        assert [node.text for node in root.content[0].content] == ["line one", "\n", "line two"]

    @pytest.mark.unit
    def test_inline_code_keeps_text(self):
        root = parse_markdown("Uses `make`")
        assert [node.text for node in root.content[0].content] == ["Uses ", "make"]

    @pytest.mark.unit
    def test_empty_input(self):
        root = parse_markdown("")
        assert root.type == NodeType.DOC
        assert root.content == ()


class TestParseSummary:
    """Test choosing between the stored format and Markdown."""

    @pytest.mark.unit
    def test_markdown_string(self):
        assert parse_summary("**Lead** engineer") == doc(paragraph(text("Lead", [BOLD]), text(" engineer")))

    @pytest.mark.unit
    def test_json_document_string(self):
        stored = '{"type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hi"}]}]}'
        assert parse_summary(stored) == doc(paragraph(text("Hi")))

    @pytest.mark.unit
    def test_mapping(self):
        assert parse_summary({"type": "doc", "content": []}) == doc()

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_input(self, value):
        assert parse_summary(value) is None

    @pytest.mark.unit
    def test_malformed_stored_document(self):
        assert parse_summary('{"type": "paragraph"}') is None

    @pytest.mark.unit
    def test_json_that_is_not_a_document_reads_as_markdown(self):
        assert parse_summary("[1, 2]") == doc(paragraph(text("[1, 2]")))
