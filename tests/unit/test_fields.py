"""Unit tests for computed field composers."""

import pytest

from vitae.contexts.computing.fields import (
    compose_basics_url,
    compose_degree_area_and_score,
    compose_full_address,
    compose_profile_url,
    compose_section_names,
    get_icon,
    join_list,
    join_urls,
    render_summary,
)
from vitae.contexts.richtext import HtmlCodeGenerator, LatexCodeGenerator, MarkdownCodeGenerator
from vitae.utils.escaping import escape_latex

TWO_PARAGRAPHS = {
    "type": "doc",
    "content": [
        {"type": "paragraph", "content": [{"type": "text", "text": "First"}]},
        {"type": "paragraph", "content": [{"type": "text", "text": "Second"}]},
    ],
}

GITHUB_PROFILE = {"network": "GitHub", "username": "ada", "url": "https://github.com/ada"}


def identity(value):
    return value or ""


class TestJoinList:
    """Test joining of courses and keywords."""

    @pytest.mark.unit
    def test_escapes_each_item(self):
        assert join_list(["C++", "R&D"], "en", escape_latex) == r"C++, R\&D"

    @pytest.mark.unit
    def test_single_item(self):
        assert join_list(["Python"], "en", identity) == "Python"

    @pytest.mark.unit
    def test_no_items(self):
        assert join_list([], "en", identity) == ""
        assert join_list(None, "en", identity) == ""

    @pytest.mark.unit
    def test_cjk_separator(self):
        assert join_list(["Python", "LaTeX"], "zh-hans", identity) == "Python、LaTeX"


class TestComposeDegreeAreaAndScore:
    """Test the education headline."""

    @pytest.mark.unit
    def test_english(self):
        item = {"degree": "Master", "area": "Physics", "score": "3.9"}
        assert compose_degree_area_and_score(item, "en", identity) == "Master, Physics, Score: 3.9"

    @pytest.mark.unit
    def test_simplified_chinese(self):
        item = {"degree": "Master", "area": "物理", "score": "3.9"}
        assert compose_degree_area_and_score(item, "zh-hans", identity) == "硕士，物理，成绩：3.9"

    @pytest.mark.unit
    def test_missing_parts_are_skipped(self):
        assert compose_degree_area_and_score({"degree": "", "area": "Physics", "score": ""}, "en", identity) == "Physics"
        assert compose_degree_area_and_score({}, "en", identity) == ""

    @pytest.mark.unit
    def test_blank_score_has_no_label(self):
        assert compose_degree_area_and_score({"degree": "Master", "score": "  "}, "en", identity) == "Master"


class TestComposeFullAddress:
    """Test the address line."""

    @pytest.mark.unit
    def test_english_order(self):
        location = {
            "address": "12 Main St",
            "city": "London",
            "region": "England",
            "country": "United Kingdom",
            "postalCode": "SW1Y 4JH",
        }
        assert compose_full_address(location, "en", identity) == (
            "12 Main St, London, England, United Kingdom, SW1Y 4JH"
        )

    @pytest.mark.unit
    def test_cjk_order_and_translated_country(self):
        location = {"address": "", "city": "上海", "region": "", "country": "China", "postalCode": ""}
        assert compose_full_address(location, "zh-hans", identity) == "中国，上海"

    @pytest.mark.unit
    def test_empty_location(self):
        assert compose_full_address({}, "en", identity) == ""

    @pytest.mark.unit
    def test_escapes_parts(self):
        location = {"address": "Suite #5", "city": "", "region": "", "country": "", "postalCode": ""}
        assert compose_full_address(location, "en", escape_latex) == r"Suite \#5"


class TestIcons:
    """Test network icon markup."""

    @pytest.mark.unit
    def test_latex_icons(self):
        assert get_icon("GitHub", "latex") == "{\\small \\faGithub}\\ "
        assert get_icon("Stack Overflow", "latex") == "{\\small \\faStackOverflow}\\ "
        assert get_icon(None, "latex") == "{\\small \\faLink}\\ "

    @pytest.mark.unit
    def test_html_icons(self):
        assert get_icon("LinkedIn", "html") == '<i class="fa-brands fa-linkedin"></i> '
        assert get_icon("Myspace", "html") == '<i class="fa-solid fa-link"></i> '

    @pytest.mark.unit
    def test_markdown_has_no_icons(self):
        assert get_icon("GitHub", "markdown") == ""


class TestLinks:
    """Test header link composition."""

    @pytest.mark.unit
    def test_latex_profile_url(self):
        assert compose_profile_url(GITHUB_PROFILE, LatexCodeGenerator()) == (
            "{\\small \\faGithub}\\ \\href{https://github.com/ada}{@ada}"
        )

    @pytest.mark.unit
    def test_markdown_profile_url(self):
        assert compose_profile_url(GITHUB_PROFILE, MarkdownCodeGenerator()) == "[@ada](https://github.com/ada)"

    @pytest.mark.unit
    def test_profile_without_icon(self):
        assert compose_profile_url(GITHUB_PROFILE, HtmlCodeGenerator(), show_icons=False) == (
            '<a href="https://github.com/ada">@ada</a>'
        )

    @pytest.mark.unit
    def test_profile_without_url(self):
        profile = {"network": "GitHub", "username": "ada", "url": ""}
        assert compose_profile_url(profile, MarkdownCodeGenerator()) == "@ada"

    @pytest.mark.unit
    def test_profile_without_username(self):
        profile = {"network": "GitHub", "username": "", "url": "https://github.com/ada"}
        assert compose_profile_url(profile, LatexCodeGenerator()) == ""

    @pytest.mark.unit
    def test_basics_url(self):
        assert compose_basics_url("https://ada.dev", HtmlCodeGenerator(), show_icons=False) == (
            '<a href="https://ada.dev">https://ada.dev</a>'
        )
        assert compose_basics_url("", HtmlCodeGenerator()) == ""

    @pytest.mark.unit
    def test_join_urls_skips_empty(self):
        assert join_urls(["a", "", "b"], "html") == "a • b"
        assert join_urls(["", ""], "markdown") == ""
        assert join_urls(["a", "b"], "latex") == "a {} {} {} • {} {} {} \nb"


class TestSectionNames:
    """Test localized and aliased section titles."""

    @pytest.mark.unit
    def test_localized_names(self):
        names = compose_section_names("zh-hans", None, identity)
        assert names["education"] == "教育背景"
        assert names["basics"] == "简介"

    @pytest.mark.unit
    def test_aliases_override_and_are_escaped(self):
        names = compose_section_names("en", {"work": "Jobs & Gigs"}, escape_latex)
        assert names["work"] == r"Jobs \& Gigs"
        assert names["education"] == "Education"


class TestRenderSummary:
    """Test summary markup per engine."""

    @pytest.mark.unit
    def test_latex_blank_lines_become_percent_lines(self):
        assert render_summary(TWO_PARAGRAPHS, LatexCodeGenerator()) == "First\n%\nSecond"

    @pytest.mark.unit
    def test_html(self):
        assert render_summary(TWO_PARAGRAPHS, HtmlCodeGenerator()) == "<p>First</p><p>Second</p>"

    @pytest.mark.unit
    def test_markdown(self):
        assert render_summary(TWO_PARAGRAPHS, MarkdownCodeGenerator()) == "First\n\nSecond"

    @pytest.mark.unit
    @pytest.mark.parametrize("stored", [None, "", "   ", '{"type": "paragraph"}'])
    def test_empty_or_malformed(self, stored):
        assert render_summary(stored, LatexCodeGenerator()) == ""

    @pytest.mark.unit
    def test_markdown_text_summary(self):
        summary = "Built the **first** compiler.\n\n- Led a team"

        latex = render_summary(summary, LatexCodeGenerator())

        assert "Built the \\textbf{first} compiler." in latex
        assert "\\begin{itemize}" in latex
        assert "Led a team" in latex

    @pytest.mark.unit
    def test_plain_text_summary(self):
        assert render_summary("Mathematician & writer", HtmlCodeGenerator()) == "<p>Mathematician &amp; writer</p>"

    @pytest.mark.unit
    def test_markdown_text_summary_keeps_links(self):
        html = render_summary("See [my site](https://ada.example.com)", HtmlCodeGenerator())

        assert 'href="https://ada.example.com"' in html
        assert ">my site</a>" in html
