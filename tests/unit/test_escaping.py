"""Unit tests for per-grammar escaping."""

import pytest

from vitae.utils.escaping import (
    LATEX_SPECIAL_CHARACTERS,
    escape_html,
    escape_latex,
    escape_latex_url,
    escape_markdown,
    get_escaper,
)


class TestEscapeLatex:
    """Test escaping of LaTeX reserved characters."""

    @pytest.mark.unit
    def test_escapes_common_specials(self):
        assert escape_latex("R&D at 50% _scale_") == r"R\&D at 50\% \_scale\_"

    @pytest.mark.unit
    def test_escapes_braces_hash_dollar(self):
        assert escape_latex("{#1: $5}") == r"\{\#1: \$5\}"

    @pytest.mark.unit
    def test_backslash_is_not_escaped_twice(self):
        """The replacement for a backslash contains braces that must stay intact."""
        assert escape_latex("a\\b") == r"a\textbackslash{}b"

    @pytest.mark.unit
    def test_tilde_and_caret(self):
        assert escape_latex("~^") == r"\textasciitilde{}\textasciicircum{}"

    @pytest.mark.unit
    def test_every_special_character_is_replaced(self):
        for char, replacement in LATEX_SPECIAL_CHARACTERS.items():
            assert escape_latex(char) == replacement

    @pytest.mark.unit
    def test_plain_text_unchanged(self):
        assert escape_latex("Plain text, 2021.") == "Plain text, 2021."

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert escape_latex(value) == ""


class TestEscapeHtml:
    """Test escaping for HTML text and attributes."""

    @pytest.mark.unit
    def test_escapes_markup(self):
        assert escape_html("<b>Tom & Jerry</b>") == "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;"

    @pytest.mark.unit
    def test_escapes_quotes(self):
        escaped = escape_html("\"quoted\" 'single'")
        assert '"' not in escaped
        assert "'" not in escaped

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_input(self, value):
        assert escape_html(value) == ""


class TestEscapeMarkdown:
    """Test escaping of Markdown markup characters."""

    @pytest.mark.unit
    def test_escapes_emphasis_and_links(self):
        assert escape_markdown("*a* _b_ [c]") == r"\*a\* \_b\_ \[c\]"

    @pytest.mark.unit
    def test_escapes_backslash_and_backtick(self):
        assert escape_markdown("a\\b `c`") == "a\\\\b \\`c\\`"

    @pytest.mark.unit
    def test_plain_text_unchanged(self):
        text = "Hello, world. Call +44 20 7946 0958 - 3.9 GPA"
        assert escape_markdown(text) == text

    @pytest.mark.unit
    def test_escapes_table_and_image_characters(self):
        assert escape_markdown("a|b ![img]") == r"a\|b \!\[img\]"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("# not a heading", r"\# not a heading"),
            ("### not a heading", r"\### not a heading"),
            ("- not a bullet", r"\- not a bullet"),
            ("+ not a bullet", r"\+ not a bullet"),
            ("> not a quote", r"\> not a quote"),
            ("1. not a list", r"1\. not a list"),
            ("12) not a list", r"12\) not a list"),
            ("---", r"\---"),
            ("first\n  - second", "first\n  \\- second"),
        ],
    )
    def test_escapes_line_start_block_markers(self, text, expected):
        assert escape_markdown(text) == expected

    @pytest.mark.unit
    def test_markers_inside_a_line_unchanged(self):
        assert escape_markdown("C# and 1.5 and #1") == "C# and 1.5 and #1"

    @pytest.mark.unit
    def test_empty_input(self):
        assert escape_markdown(None) == ""


class TestGetEscaper:
    """Test engine escaper lookup."""

    @pytest.mark.unit
    def test_known_engines(self):
        assert get_escaper("latex") is escape_latex
        assert get_escaper("html") is escape_html
        assert get_escaper("markdown") is escape_markdown

    @pytest.mark.unit
    def test_unknown_engine(self):
        with pytest.raises(ValueError, match="pdf"):
            get_escaper("pdf")


@pytest.mark.unit
def test_escape_latex_url():
    """Percent and hash are escaped inside \\href targets; the rest is verbatim."""
    assert escape_latex_url("https://x.com/a%20b#top") == r"https://x.com/a\%20b\#top"
    assert escape_latex_url("https://x.com/a_b") == "https://x.com/a_b"
    assert escape_latex_url(None) == ""
