"""
Renderer Dispatcher

Maps (engine, template id) pairs to renderer classes and builds the renderer
for a resume layout. The template table is closed: an unknown engine is an
error, while a missing or unknown template id falls back to the engine's
default template.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from vitae.contexts.computing import get_template_id, normalize_layouts
from vitae.contexts.rendering.base import Renderer
from vitae.contexts.rendering.exceptions import (
    LayoutNotFoundError,
    UnknownEngineError,
    UnsupportedExtensionError,
)
from vitae.contexts.rendering.html import CalmRenderer, VscodeRenderer
from vitae.contexts.rendering.latex import (
    ModerncvBankingRenderer,
    ModerncvCasualRenderer,
    ModerncvClassicRenderer,
)
from vitae.contexts.rendering.logger import log_template_fallback
from vitae.contexts.rendering.markdown import MarkdownRenderer

ENGINES = ("latex", "html", "markdown")

# Engine -> template id -> renderer class
TEMPLATES: Dict[str, Dict[str, Type[Renderer]]] = {
    "latex": {
        "moderncv-banking": ModerncvBankingRenderer,
        "moderncv-casual": ModerncvCasualRenderer,
        "moderncv-classic": ModerncvClassicRenderer,
    },
    "html": {
        "calm": CalmRenderer,
        "vscode": VscodeRenderer,
    },
    "markdown": {
        "basic": MarkdownRenderer,
    },
}

DEFAULT_TEMPLATES = {
    "latex": "moderncv-banking",
    "html": "calm",
    "markdown": "basic",
}

# Output file extension -> engine
EXTENSION_ENGINES = {
    ".tex": "latex",
    ".html": "html",
    ".htm": "html",
    ".md": "markdown",
}


def resolve_template(engine: Optional[str], template_id: Optional[str] = None) -> Type[Renderer]:
    """
    Resolve the renderer class for an (engine, template id) pair.

    Args:
        engine: Engine name
        template_id: Template id; missing or unknown ids select the
                     engine's default template

    Returns:
        Renderer class

    Raises:
        UnknownEngineError: If the engine does not exist
    """
    if engine not in TEMPLATES:
        raise UnknownEngineError(engine, ENGINES)

    templates = TEMPLATES[engine]
    if template_id in templates:
        return templates[template_id]

    default = DEFAULT_TEMPLATES[engine]
    log_template_fallback(engine, template_id or "", default)
    return templates[default]


def get_resume_renderer(resume: Mapping[str, Any], layout_index: int = 0) -> Renderer:
    """
    Build the renderer for one layout of a resume.

    Args:
        resume: Resume mapping as loaded from YAML/JSON
        layout_index: Index into the resume's layouts (after defaults are
                      applied, so a resume without layouts has the default
                      LaTeX and Markdown layouts)

    Returns:
        Renderer instance ready to render()

    Raises:
        LayoutNotFoundError: If layout_index selects no layout
        UnknownEngineError: If the layout's engine does not exist
    """
    layouts = normalize_layouts(resume)
    if not 0 <= layout_index < len(layouts):
        raise LayoutNotFoundError(layout_index, len(layouts))

    layout = layouts[layout_index]
    renderer_class = resolve_template(layout.get("engine"), get_template_id(layout))
    return renderer_class(resume, layout_index)


def engine_from_extension(path: Path) -> str:
    """
    Get the engine whose output an output path expects.

    Raises:
        UnsupportedExtensionError: If the extension belongs to no engine
    """
    extension = Path(path).suffix.lower()
    if extension not in EXTENSION_ENGINES:
        raise UnsupportedExtensionError(path, EXTENSION_ENGINES)
    return EXTENSION_ENGINES[extension]


def list_templates(engine: Optional[str] = None) -> List[Tuple[str, str]]:
    """
    List (engine, template id) pairs, optionally for a single engine.

    Raises:
        UnknownEngineError: If engine is given and does not exist
    """
    if engine is not None and engine not in TEMPLATES:
        raise UnknownEngineError(engine, ENGINES)

    engines = [engine] if engine is not None else ENGINES
    return [(name, template_id) for name in engines for template_id in TEMPLATES[name]]
