"""
Markdown Renderer

Plain Markdown documents: a level-one heading with contact details, then one
level-two heading per section.
"""

from vitae.contexts.rendering.base import TemplateRenderer
from vitae.utils.text_processing import join_non_empty, set_max_consecutive_blank_lines


class MarkdownRenderer(TemplateRenderer):
    """Renderer for the basic Markdown template."""

    engine = "markdown"
    template_id = "basic"
    template_dir = "basic"

    def render_preamble(self) -> str:
        # Markdown documents have no preamble
        return ""

    def render(self) -> str:
        document = join_non_empty(
            [
                self.render_preamble(),
                self.render_basics(),
                self.render_location(),
                self.render_profiles(),
                self.render_ordered_sections(),
            ]
        )
        return set_max_consecutive_blank_lines(document).strip() + "\n"
