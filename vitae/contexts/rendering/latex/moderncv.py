"""
moderncv Renderers

LaTeX renderers for the banking, casual and classic styles of the moderncv
document class. The styles share every template; they differ in the style
name, the CJK colon override (banking only) and the column order of
references.
"""

import re
from typing import Any, Dict

from vitae.contexts.rendering.base import TemplateRenderer
from vitae.utils.text_processing import join_non_empty, set_max_consecutive_blank_lines

# babel options for locales that need them with moderncv
BABEL_OPTIONS = {
    "es": "spanish,es-lcroman",
    "fr": "french",
    "no": "norsk",
}

# Tried in order; the last one found becomes the main font
MAIN_FONTS = ("Linux Libertine", "Linux Libertine O")


def normalize_unit(value: Any) -> str:
    """Remove whitespace from a LaTeX length such as '2.5 cm'."""
    return re.sub(r"\s+", "", str(value or ""))


class ModerncvRenderer(TemplateRenderer):
    """
    Base class for moderncv renderers.

    Subclasses set the moderncv style and template id.
    """

    engine = "latex"
    template_dir = "moderncv"

    #: moderncv style name
    style: str = ""

    def template_context(self) -> Dict[str, Any]:
        context = super().template_context()
        context["style"] = self.style
        return context

    def render_preamble(self) -> str:
        typography = self.layout.get("typography") or {}
        page = self.layout.get("page") or {}
        margins = page.get("margins") or {}
        fontspec = (self.layout.get("advanced") or {}).get("fontspec") or {}

        return self.render_template(
            "preamble",
            font_size=normalize_unit(typography.get("fontSize")),
            margins={side: normalize_unit(margins.get(side)) for side in ("top", "bottom", "left", "right")},
            show_page_numbers=bool(page.get("showPageNumbers")),
            babel=BABEL_OPTIONS.get(self.language, ""),
            main_fonts=MAIN_FONTS,
            numbers=fontspec.get("numbers") or "OldStyle",
        )

    def render(self) -> str:
        header = join_non_empty(
            [
                self.render_preamble(),
                self.render_basics(),
                self.render_location(),
                self.render_profiles(),
            ]
        )

        document = (
            f"{header}\n\n"
            "\\begin{document}\n\n"
            "\\maketitle\n\n"
            f"{self.render_ordered_sections()}\n\n"
            "\\end{document}\n"
        )
        return set_max_consecutive_blank_lines(document)


class ModerncvBankingRenderer(ModerncvRenderer):
    """moderncv with the banking style."""

    template_id = "moderncv-banking"
    style = "banking"


class ModerncvCasualRenderer(ModerncvRenderer):
    """moderncv with the casual style."""

    template_id = "moderncv-casual"
    style = "casual"


class ModerncvClassicRenderer(ModerncvRenderer):
    """moderncv with the classic style."""

    template_id = "moderncv-classic"
    style = "classic"
