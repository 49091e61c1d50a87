"""
Rendering Registries

Centralized registry for loading and caching the Jinja2 templates of each
output engine.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    TemplateNotFound,
)

from vitae.contexts.rendering.exceptions import TemplateRenderError
from vitae.utils.escaping import escape_latex_url, get_escaper
from vitae.utils.text_processing import join_non_empty

load_dotenv()
DEFAULT_TEMPLATES_PATH = Path(__file__).parent / "template"
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH") or DEFAULT_TEMPLATES_PATH)

# Engine -> file extension of its templates (and of its output)
TEMPLATE_EXTENSIONS = {
    "latex": "tex",
    "html": "html",
    "markdown": "md",
}

# Custom delimiters to avoid LaTeX brace conflicts:
# - Variable: <<< var >>>
# - Block: <%% block %%>
# - Comment: <# comment #>
LATEX_DELIMITERS = {
    "variable_start_string": "<<<",
    "variable_end_string": ">>>",
    "block_start_string": "<%%",
    "block_end_string": "%%>",
    "comment_start_string": "<#",
    "comment_end_string": "#>",
}


class TemplateRegistry:
    """
    Registry for loading and caching the Jinja2 templates of one engine.

    Templates are stored in {templates_path}/{engine}/{name}.{ext}.jinja.
    LaTeX templates use custom delimiters (see LATEX_DELIMITERS); HTML and
    Markdown templates use the Jinja2 defaults. Every environment is strict
    about undefined variables and provides:
    - esc: escape filter for the engine's grammar
    - join_non_empty: filter joining non-empty fragments with a separator
    - url: filter preparing a URL for the engine's link construct
    """

    def __init__(self, engine: str, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            engine: Engine name ("latex", "html" or "markdown")
            templates_path: Root of the template tree. Defaults to
                           VITAE_TEMPLATES_PATH from environment

        Raises:
            ValueError: If the engine has no templates
        """
        if engine not in TEMPLATE_EXTENSIONS:
            available = ", ".join(sorted(TEMPLATE_EXTENSIONS))
            raise ValueError(f"No templates for engine '{engine}'. Available: {available}")

        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.engine = engine
        self.extension = TEMPLATE_EXTENSIONS[engine]
        self.templates_base_path = Path(templates_path) / engine
        self._cache: Dict[str, Template] = {}

        delimiters = LATEX_DELIMITERS if engine == "latex" else {}
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Values are escaped explicitly with the esc filter
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
            **delimiters,
        )
        self.env.filters["esc"] = get_escaper(engine)
        self.env.filters["join_non_empty"] = join_non_empty
        self.env.filters["url"] = escape_latex_url if engine == "latex" else (lambda value: value or "")

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name relative to the engine directory, without
                  extension (e.g., 'moderncv/education')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = self.get_template_file(name)

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found for '{name}' at {self.templates_base_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_file(self, name: str) -> str:
        """Get a template's file name relative to the engine directory."""
        return f"{name}.{self.extension}.jinja"

    def get_template_path(self, name: str) -> Path:
        """Get the file path for a template."""
        return self.templates_base_path / self.get_template_file(name)

    def render(self, name: str, context: Mapping[str, Any]) -> str:
        """
        Render a template with a context.

        Args:
            name: Template name (see get_template)
            context: Template variables

        Returns:
            Rendered text without surrounding whitespace

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateRenderError: If rendering fails
        """
        template = self.get_template(name)

        try:
            return template.render(**context).strip()
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render {self.engine} template '{name}'",
                template_name=name,
                template_path=self.get_template_path(name),
                original_error=e,
            ) from e

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """Check if a template is in the cache."""
        return name in self._cache


_registries: Dict[str, TemplateRegistry] = {}


def get_template_registry(engine: str) -> TemplateRegistry:
    """Return the process-wide template registry for an engine."""
    if engine not in _registries:
        _registries[engine] = TemplateRegistry(engine)
    return _registries[engine]
