"""
HTML Renderers

Self-contained HTML5 documents. The calm and vscode templates share their
markup and differ only in the stylesheet inlined into the document head.
"""

import re
from typing import Any, Dict

from vitae.contexts.rendering.base import TemplateRenderer
from vitae.utils.text_processing import join_non_empty, set_max_consecutive_blank_lines

ICONS_STYLESHEET = "https://cdnjs.cloudflare.com/ajax/libs/font-awesome/6.5.1/css/all.min.css"

DEFAULT_FONT_SIZE = "16px"

_LEADING_CSS_COMMENT = re.compile(r"^/\*.*?\*/", re.DOTALL)


def trim_css(css: str) -> str:
    """Drop a stylesheet's leading comment and surrounding whitespace."""
    return _LEADING_CSS_COMMENT.sub("", css, count=1).strip()


class HtmlRenderer(TemplateRenderer):
    """
    Base class for HTML renderers.

    Subclasses set the template id, which also names the stylesheet in
    template/html/styles/.
    """

    engine = "html"
    template_dir = "resume"

    def _advanced(self) -> Dict[str, Any]:
        return self.layout.get("advanced") or {}

    @property
    def title(self) -> str:
        """Document title: advanced.title, else "<name> Resume"."""
        title = self._advanced().get("title")
        if title:
            return title
        name = self.content["basics"]["name"]
        return f"{name} Resume" if name else "Resume"

    def stylesheet(self) -> str:
        """Reset rules followed by this template's rules."""
        styles_path = self.registry.templates_base_path / "styles"
        return "\n".join(
            trim_css((styles_path / f"{name}.css").read_text(encoding="utf-8"))
            for name in ("reset", self.template_id)
        )

    def render_preamble(self) -> str:
        typography = self.layout.get("typography") or {}
        return self.render_template(
            "preamble",
            title=self.title,
            font_size=typography.get("fontSize") or DEFAULT_FONT_SIZE,
            icons_stylesheet=ICONS_STYLESHEET,
            stylesheet=self.stylesheet(),
        )

    def render(self) -> str:
        header = join_non_empty(
            [self.render_basics(), self.render_location(), self.render_profiles()],
            "\n",
        )

        document = self.render_template(
            "document",
            preamble=self.render_preamble(),
            header=header,
            sections=self.render_ordered_sections("\n"),
            footer=self._advanced().get("footer") or "",
        )
        return set_max_consecutive_blank_lines(document, max_consecutive=0) + "\n"


class CalmRenderer(HtmlRenderer):
    """HTML with the calm stylesheet."""

    template_id = "calm"


class VscodeRenderer(HtmlRenderer):
    """HTML with the vscode stylesheet."""

    template_id = "vscode"
