"""Unit tests for TemplateRegistry class."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from vitae.contexts.rendering.exceptions import TemplateRenderError
from vitae.contexts.rendering.registries import TemplateRegistry, get_template_registry


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry("latex")
    assert registry.templates_base_path.exists()
    assert registry.extension == "tex"
    assert registry._cache == {}


@pytest.mark.unit
def test_unknown_engine():
    """Test that engines without templates are rejected."""
    with pytest.raises(ValueError, match="pdf"):
        TemplateRegistry("pdf")


@pytest.mark.unit
@pytest.mark.parametrize(
    "engine, name",
    [("latex", "moderncv/preamble"), ("html", "resume/document"), ("markdown", "basic/basics")],
)
def test_get_template(engine, name):
    """Test loading a shipped template of each engine."""
    registry = TemplateRegistry(engine)
    template = registry.get_template(name)

    assert template is not None
    assert registry.is_cached(name)


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry("latex")

    # First load
    template1 = registry.get_template("moderncv/work")
    assert registry.is_cached("moderncv/work")

    # Second load should return same object from cache
    template2 = registry.get_template("moderncv/work")
    assert template1 is template2


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry("latex")

    with pytest.raises(TemplateNotFound):
        registry.get_template("moderncv/nonexistent")


@pytest.mark.unit
def test_get_template_path():
    """Test getting template file path."""
    registry = TemplateRegistry("markdown")
    path = registry.get_template_path("basic/work")

    assert isinstance(path, Path)
    assert path.name == "work.md.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache():
    """Test cache clearing."""
    registry = TemplateRegistry("html")

    # Load template
    registry.get_template("resume/summary")
    assert len(registry._cache) == 1

    # Clear cache
    registry.clear_cache()
    assert len(registry._cache) == 0


@pytest.mark.unit
def test_custom_delimiters(tmp_path):
    """Test LaTeX templates use <<< >>> / <%% %%> and escape with the esc filter."""
    (tmp_path / "latex").mkdir()
    (tmp_path / "latex" / "entry.tex.jinja").write_text(
        "\\href{<<< link | url >>>}{x}\n"
        "<%% if name %%>\\textbf{<<< name | esc >>>}<%% endif %%>\n",
        encoding="utf-8",
    )
    registry = TemplateRegistry("latex", templates_path=tmp_path)

    result = registry.render("entry", {"name": "R&D", "link": "https://e.com/#top"})
    assert result == "\\href{https://e.com/\\#top}{x}\n\\textbf{R\\&D}"


@pytest.mark.unit
def test_default_delimiters_for_html(tmp_path):
    """Test HTML templates use Jinja2's default delimiters."""
    (tmp_path / "html").mkdir()
    (tmp_path / "html" / "item.html.jinja").write_text(
        "<li>{{ value | esc }}</li>\n", encoding="utf-8"
    )
    registry = TemplateRegistry("html", templates_path=tmp_path)

    assert registry.render("item", {"value": "a < b"}) == "<li>a &lt; b</li>"


@pytest.mark.unit
def test_join_non_empty_filter(tmp_path):
    """Test the join_non_empty filter skips empty fragments."""
    (tmp_path / "markdown").mkdir()
    (tmp_path / "markdown" / "line.md.jinja").write_text(
        "{{ parts | join_non_empty(', ') }}", encoding="utf-8"
    )
    registry = TemplateRegistry("markdown", templates_path=tmp_path)

    assert registry.render("line", {"parts": ["a", "", "b"]}) == "a, b"


@pytest.mark.unit
def test_undefined_variable_raises(tmp_path):
    """Test that StrictUndefined failures are wrapped with template details."""
    (tmp_path / "markdown").mkdir()
    (tmp_path / "markdown" / "broken.md.jinja").write_text("{{ missing.field }}", encoding="utf-8")
    registry = TemplateRegistry("markdown", templates_path=tmp_path)

    with pytest.raises(TemplateRenderError) as exc_info:
        registry.render("broken", {})

    assert exc_info.value.template_name == "broken"
    assert exc_info.value.template_path == tmp_path / "markdown" / "broken.md.jinja"
    assert exc_info.value.original_error is not None


@pytest.mark.unit
def test_get_template_registry_is_shared():
    """Test the module-level registry cache."""
    assert get_template_registry("html") is get_template_registry("html")
    assert get_template_registry("html") is not get_template_registry("latex")
