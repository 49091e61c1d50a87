"""
Computed-Field Transformer

Enriches a resume with the display strings every renderer needs, computed
once per (resume, layout) so all templates of an engine agree on them.

Each content item gains a "computed" mapping; the content itself gains
content["computed"] with section names and header links. Raw fields are left
exactly as they were loaded; templates escape them where they print them.
"""

import copy
from typing import Any, Dict, Mapping

from vitae.contexts.computing.dates import get_date_range, localize_date
from vitae.contexts.computing.defaults import (
    DATED_SECTIONS,
    KEYWORD_SECTIONS,
    SINGLE_DATE_FIELDS,
    SUMMARY_SECTIONS,
)
from vitae.contexts.computing.fields import (
    compose_basics_url,
    compose_degree_area_and_score,
    compose_full_address,
    compose_profile_url,
    compose_section_names,
    join_list,
    join_urls,
    render_summary,
)
from vitae.contexts.computing.normalizer import (
    normalize_layouts,
    normalize_locale_settings,
    normalize_resume_content,
)
from vitae.contexts.localization import get_term
from vitae.contexts.richtext import CodeGenerator, get_code_generator

# Value of computed.endDate for entries that are still ongoing
PRESENT_END_DATE = "Present"


def _computed(item: Dict[str, Any]) -> Dict[str, Any]:
    return item.setdefault("computed", {})


def _compute_dates(content: Dict[str, Any], language: str, generator: CodeGenerator) -> None:
    escape = generator.escape

    for section, field in SINGLE_DATE_FIELDS.items():
        for item in content[section]:
            _computed(item)[field] = escape(localize_date(item[field], language))

    for section in DATED_SECTIONS:
        for item in content[section]:
            computed = _computed(item)
            computed["startDate"] = escape(localize_date(item["startDate"], language))
            computed["endDate"] = escape(localize_date(item["endDate"], language) or PRESENT_END_DATE)
            computed["dateRange"] = escape(get_date_range(item["startDate"], item["endDate"], language))


def _compute_lists(content: Dict[str, Any], language: str, generator: CodeGenerator) -> None:
    escape = generator.escape

    for item in content["education"]:
        computed = _computed(item)
        computed["courses"] = join_list(item["courses"], language, escape)
        computed["degreeAreaAndScore"] = compose_degree_area_and_score(item, language, escape)

    for section in KEYWORD_SECTIONS:
        for item in content[section]:
            _computed(item)["keywords"] = join_list(item["keywords"], language, escape)


def _compute_options(content: Dict[str, Any], language: str, generator: CodeGenerator) -> None:
    escape = generator.escape

    for item in content["languages"]:
        computed = _computed(item)
        computed["language"] = escape(get_term(language, "languages", item["language"]))
        computed["fluency"] = escape(get_term(language, "fluencies", item["fluency"]))

    for item in content["skills"]:
        _computed(item)["level"] = escape(get_term(language, "skills", item["level"]))

    _computed(content["location"])["fullAddress"] = compose_full_address(
        content["location"], language, escape
    )


def _compute_links(content: Dict[str, Any], generator: CodeGenerator, show_icons: bool) -> None:
    basics_url = compose_basics_url(content["basics"]["url"], generator, show_icons)
    _computed(content["basics"])["url"] = basics_url

    for profile in content["profiles"]:
        _computed(profile)["url"] = compose_profile_url(profile, generator, show_icons)

    profile_urls = [profile["computed"]["url"] for profile in content["profiles"]]
    _computed(content)["urls"] = join_urls([basics_url] + profile_urls, generator.engine)


def _compute_summaries(content: Dict[str, Any], generator: CodeGenerator) -> None:
    for section in SUMMARY_SECTIONS:
        items = [content[section]] if section == "basics" else content[section]
        for item in items:
            _computed(item)["summary"] = render_summary(item["summary"], generator)


def transform_resume_content(
    content: Mapping[str, Any],
    language: str,
    layout: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Normalize resume content and attach computed fields for one layout.

    Args:
        content: Resume content mapping
        language: Normalized locale code
        layout: Normalized layout (decides engine, icons, link style, aliases)

    Returns:
        New content dict with "computed" records

    Raises:
        ValueError: If the layout's engine has no code generator
    """
    underline_links = bool(((layout.get("typography") or {}).get("links") or {}).get("underline"))
    show_icons = bool((layout.get("advanced") or {}).get("showIcons", True))
    aliases = (layout.get("sections") or {}).get("aliases")

    generator = get_code_generator(layout.get("engine"), underline_links=underline_links)
    content = normalize_resume_content(content)

    _compute_dates(content, language, generator)
    _compute_lists(content, language, generator)
    _compute_options(content, language, generator)
    _compute_links(content, generator, show_icons)
    _compute_summaries(content, generator)
    _computed(content)["sectionNames"] = compose_section_names(language, aliases, generator.escape)

    return content


def transform_resume(resume: Mapping[str, Any], layout_index: int = 0) -> Dict[str, Any]:
    """
    Produce a render-ready copy of a resume for one of its layouts.

    The input is never modified. The returned resume has a normalized locale,
    every layout merged over its engine's defaults, complete content and the
    computed fields for layouts[layout_index].

    Args:
        resume: Resume mapping as loaded from YAML/JSON
        layout_index: Index of the layout to compute fields for

    Returns:
        New resume dict

    Raises:
        IndexError: If layout_index does not select a layout
        ValueError: If the selected layout's engine is unknown
    """
    resume = copy.deepcopy(dict(resume))

    locale = normalize_locale_settings(resume.get("locale"))
    layouts = normalize_layouts(resume)

    if not 0 <= layout_index < len(layouts):
        raise IndexError(f"Layout index {layout_index} out of range ({len(layouts)} layouts)")

    resume["locale"] = locale
    resume["layouts"] = layouts
    resume["content"] = transform_resume_content(
        resume.get("content") or {}, locale["language"], layouts[layout_index]
    )
    return resume
