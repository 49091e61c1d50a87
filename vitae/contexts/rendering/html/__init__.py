"""HTML renderers."""

from vitae.contexts.rendering.html.renderer import CalmRenderer, HtmlRenderer, VscodeRenderer

__all__ = ["CalmRenderer", "HtmlRenderer", "VscodeRenderer"]
