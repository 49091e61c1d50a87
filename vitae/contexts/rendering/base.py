"""
Renderer Base

The fixed method contract every (engine, template) renderer implements, and
the canonical section order shared by all of them.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Tuple

from vitae.contexts.computing import transform_resume
from vitae.contexts.localization import get_punctuations, get_terms, is_cjk_locale
from vitae.contexts.rendering.registries import TEMPLATE_EXTENSIONS, get_template_registry
from vitae.utils.text_processing import join_non_empty

# Body sections in the order they appear in every document. "basics" here is
# the summary section; name, contact details, location and profiles form the
# document header and are rendered ahead of these.
SECTION_ORDER = (
    "basics",
    "education",
    "work",
    "languages",
    "skills",
    "awards",
    "certificates",
    "publications",
    "references",
    "projects",
    "interests",
    "volunteer",
)


class Renderer(ABC):
    """
    Abstract resume renderer for one (engine, template) pair.

    A renderer is built from a resume and a layout index, transforms the
    resume once on construction, and is meant to be used for a single render.

    Attributes:
        resume: Transformed resume (with computed fields)
        layout_index: Index of the layout being rendered
        layout: The normalized layout
        content: Transformed resume content
        language: Normalized locale code
    """

    #: Engine name, set by engine base classes
    engine: str = ""

    #: Template id, set by concrete renderers
    template_id: str = ""

    def __init__(self, resume: Mapping[str, Any], layout_index: int = 0):
        self.layout_index = layout_index
        self.resume = transform_resume(resume, layout_index)
        self.layout: Dict[str, Any] = self.resume["layouts"][layout_index]
        self.content: Dict[str, Any] = self.resume["content"]
        self.language: str = self.resume["locale"]["language"]

    @property
    def output_extension(self) -> str:
        """File extension of the rendered document, including the dot."""
        return f".{TEMPLATE_EXTENSIONS[self.engine]}"

    @property
    def is_cjk(self) -> bool:
        return is_cjk_locale(self.language)

    @property
    def show_icons(self) -> bool:
        return bool((self.layout.get("advanced") or {}).get("showIcons", True))

    # Contract

    @abstractmethod
    def render_preamble(self) -> str:
        pass

    @abstractmethod
    def render_basics(self) -> str:
        pass

    @abstractmethod
    def render_location(self) -> str:
        pass

    @abstractmethod
    def render_profiles(self) -> str:
        pass

    @abstractmethod
    def render_summary(self) -> str:
        pass

    @abstractmethod
    def render_education(self) -> str:
        pass

    @abstractmethod
    def render_work(self) -> str:
        pass

    @abstractmethod
    def render_languages(self) -> str:
        pass

    @abstractmethod
    def render_skills(self) -> str:
        pass

    @abstractmethod
    def render_awards(self) -> str:
        pass

    @abstractmethod
    def render_certificates(self) -> str:
        pass

    @abstractmethod
    def render_publications(self) -> str:
        pass

    @abstractmethod
    def render_references(self) -> str:
        pass

    @abstractmethod
    def render_projects(self) -> str:
        pass

    @abstractmethod
    def render_interests(self) -> str:
        pass

    @abstractmethod
    def render_volunteer(self) -> str:
        pass

    @abstractmethod
    def render(self) -> str:
        """Render the complete document."""

    # Composition

    def section_renderers(self) -> List[Tuple[str, Callable[[], str]]]:
        """Section renderers paired with their section ids, in canonical order."""
        methods = {
            "basics": self.render_summary,
            "education": self.render_education,
            "work": self.render_work,
            "languages": self.render_languages,
            "skills": self.render_skills,
            "awards": self.render_awards,
            "certificates": self.render_certificates,
            "publications": self.render_publications,
            "references": self.render_references,
            "projects": self.render_projects,
            "interests": self.render_interests,
            "volunteer": self.render_volunteer,
        }
        return [(section, methods[section]) for section in SECTION_ORDER]

    def render_ordered_sections(self, separator: str = "\n\n") -> str:
        """Render every body section in canonical order, dropping empty ones."""
        return join_non_empty([render() for _, render in self.section_renderers()], separator)


class TemplateRenderer(Renderer):
    """
    Renderer whose sections are Jinja2 templates.

    Each section method renders {template_dir}/{section} with the section's
    items and the shared context; a section without items renders as "".
    """

    #: Directory of this renderer's templates under the engine directory
    template_dir: str = ""

    def __init__(self, resume: Mapping[str, Any], layout_index: int = 0):
        super().__init__(resume, layout_index)
        self.registry = get_template_registry(self.engine)

    def template_context(self) -> Dict[str, Any]:
        """Variables available to every template of this renderer."""
        punctuations = get_punctuations(self.language)
        return {
            "content": self.content,
            "computed": self.content["computed"],
            "section_names": self.content["computed"]["sectionNames"],
            "layout": self.layout,
            "language": self.language,
            "is_cjk": self.is_cjk,
            "show_icons": self.show_icons,
            "template_id": self.template_id,
            "terms": get_terms(self.language),
            "punctuations": punctuations,
            "colon": punctuations["colon"],
            "comma": punctuations["comma"],
        }

    def render_template(self, name: str, **extra: Any) -> str:
        """Render one template of this renderer's directory."""
        context = {**self.template_context(), **extra}
        return self.registry.render(f"{self.template_dir}/{name}", context)

    def render_section(self, section: str) -> str:
        """Render a list section; "" when it has no items."""
        items = self.content[section]
        if not items:
            return ""
        return self.render_template(
            section, items=items, section_name=self.content["computed"]["sectionNames"][section]
        )

    def render_basics(self) -> str:
        return self.render_template("basics", basics=self.content["basics"])

    def render_location(self) -> str:
        location = self.content["location"]
        if not location["computed"]["fullAddress"]:
            return ""
        return self.render_template("location", location=location)

    def render_profiles(self) -> str:
        if not self.content["profiles"] and not self.content["basics"]["url"]:
            return ""
        return self.render_template("profiles", profiles=self.content["profiles"])

    def render_summary(self) -> str:
        basics = self.content["basics"]
        if not basics["computed"]["summary"]:
            return ""
        return self.render_template(
            "summary", basics=basics, section_name=self.content["computed"]["sectionNames"]["basics"]
        )

    def render_education(self) -> str:
        return self.render_section("education")

    def render_work(self) -> str:
        return self.render_section("work")

    def render_languages(self) -> str:
        return self.render_section("languages")

    def render_skills(self) -> str:
        return self.render_section("skills")

    def render_awards(self) -> str:
        return self.render_section("awards")

    def render_certificates(self) -> str:
        return self.render_section("certificates")

    def render_publications(self) -> str:
        return self.render_section("publications")

    def render_references(self) -> str:
        return self.render_section("references")

    def render_projects(self) -> str:
        return self.render_section("projects")

    def render_interests(self) -> str:
        return self.render_section("interests")

    def render_volunteer(self) -> str:
        return self.render_section("volunteer")
