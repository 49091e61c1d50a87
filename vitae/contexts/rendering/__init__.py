"""
Rendering Context

Responsibilities:
- Resolves a layout's (engine, template id) to a renderer, falling back to
  the engine's default template
- Renders the document header and every non-empty section in a fixed order
  through per-engine Jinja2 templates
- Assembles complete LaTeX, HTML or Markdown documents

Owns: Template registry, renderers, dispatch, rendering logs
Never: Computes display strings (see computing) or compiles output
"""

from vitae.contexts.rendering.base import SECTION_ORDER, Renderer, TemplateRenderer
from vitae.contexts.rendering.dispatcher import (
    DEFAULT_TEMPLATES,
    ENGINES,
    TEMPLATES,
    engine_from_extension,
    get_resume_renderer,
    list_templates,
    resolve_template,
)
from vitae.contexts.rendering.exceptions import (
    LayoutNotFoundError,
    TemplateRenderError,
    UnknownEngineError,
    UnsupportedExtensionError,
)
from vitae.contexts.rendering.html import CalmRenderer, HtmlRenderer, VscodeRenderer
from vitae.contexts.rendering.latex import (
    ModerncvBankingRenderer,
    ModerncvCasualRenderer,
    ModerncvClassicRenderer,
    ModerncvRenderer,
)
from vitae.contexts.rendering.markdown import MarkdownRenderer
from vitae.contexts.rendering.registries import TemplateRegistry, get_template_registry

__all__ = [
    # Contract
    "SECTION_ORDER",
    "Renderer",
    "TemplateRenderer",
    # Dispatch
    "DEFAULT_TEMPLATES",
    "ENGINES",
    "TEMPLATES",
    "engine_from_extension",
    "get_resume_renderer",
    "list_templates",
    "resolve_template",
    # Renderers
    "CalmRenderer",
    "HtmlRenderer",
    "VscodeRenderer",
    "ModerncvBankingRenderer",
    "ModerncvCasualRenderer",
    "ModerncvClassicRenderer",
    "ModerncvRenderer",
    "MarkdownRenderer",
    # Templates
    "TemplateRegistry",
    "get_template_registry",
    # Errors
    "LayoutNotFoundError",
    "TemplateRenderError",
    "UnknownEngineError",
    "UnsupportedExtensionError",
]
