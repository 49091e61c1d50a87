"""
Resume Normalization

Brings a loaded resume into the complete shape the computed-field transformer
and the renderers expect. All functions return new objects and leave their
input untouched.
"""

import copy
from typing import Any, Dict, List, Mapping

from omegaconf import OmegaConf

from vitae.contexts.computing.defaults import (
    DEFAULT_LAYOUTS_BY_ENGINE,
    DEFAULT_RESUME_LAYOUTS,
    DEFAULT_RESUME_LOCALE,
    LIST_FIELDS,
    RICH_TEXT_FIELDS,
    SECTION_FIELDS,
    SINGLE_SECTIONS,
)
from vitae.contexts.localization import is_cjk_locale, normalize_locale


def _normalize_value(field: str, value: Any) -> Any:
    """Fill one missing field and coerce scalar values to strings."""
    if field in LIST_FIELDS:
        return [str(item) for item in value or [] if item is not None]
    if value is None:
        return ""
    if field in RICH_TEXT_FIELDS or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _normalize_item(section: str, item: Mapping[str, Any]) -> Dict[str, Any]:
    normalized = dict(item or {})
    for field in SECTION_FIELDS[section]:
        normalized[field] = _normalize_value(field, normalized.get(field))
    return normalized


def normalize_resume_content(content: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Fill missing sections and fields of resume content.

    Missing single sections become mappings with every field set to "", missing
    list sections become [], missing scalar fields become "", and missing
    courses/keywords become []. Numbers are converted to strings.

    Args:
        content: The resume's "content" mapping (may be None or partial)

    Returns:
        New, fully populated content dict
    """
    content = copy.deepcopy(dict(content or {}))

    for section in SECTION_FIELDS:
        value = content.get(section)
        if section in SINGLE_SECTIONS:
            content[section] = _normalize_item(section, value or {})
        else:
            content[section] = [_normalize_item(section, item) for item in value or [] if item]

    return content


def normalize_locale_settings(locale: Any) -> Dict[str, str]:
    """
    Normalize the resume's locale mapping.

    Args:
        locale: Mapping with a "language" key, a bare language code, or None

    Returns:
        {"language": <supported code>}; unsupported codes become "en"
    """
    if isinstance(locale, str):
        language = locale
    elif isinstance(locale, Mapping):
        language = locale.get("language")
    else:
        language = DEFAULT_RESUME_LOCALE["language"]

    return {"language": normalize_locale(language)}


def get_template_id(layout: Mapping[str, Any]) -> str:
    """
    Read the template id of a layout.

    Args:
        layout: Layout mapping whose "template" is an id string or {"id": ...}

    Returns:
        Template id, or "" when absent
    """
    template = layout.get("template")
    if isinstance(template, Mapping):
        template = template.get("id")
    return template or ""


def normalize_layout(layout: Mapping[str, Any], language: str) -> Dict[str, Any]:
    """
    Merge a layout over the defaults for its engine.

    Layouts for an engine without defaults are returned as a plain copy; the
    dispatcher reports the unknown engine.

    Args:
        layout: User layout mapping
        language: Normalized locale code (decides fontspec "Auto" numbers)

    Returns:
        New layout dict
    """
    layout = copy.deepcopy(dict(layout or {}))

    # Flatten {"id": ...} so defaults and user value merge as the same type
    if "template" in layout:
        layout["template"] = get_template_id(layout)
        if not layout["template"]:
            del layout["template"]

    defaults = DEFAULT_LAYOUTS_BY_ENGINE.get(layout.get("engine"))
    if defaults is None:
        return layout

    merged = OmegaConf.merge(OmegaConf.create(defaults), OmegaConf.create(layout))
    normalized = OmegaConf.to_container(merged, resolve=False)

    if normalized["engine"] == "latex":
        advanced = normalized["advanced"] = normalized.get("advanced") or {}
        fontspec = advanced["fontspec"] = advanced.get("fontspec") or {}
        if fontspec.get("numbers") in (None, "", "Auto"):
            fontspec["numbers"] = "Lining" if is_cjk_locale(language) else "OldStyle"

    return normalized


def normalize_layouts(resume: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """
    Normalize every layout of a resume.

    A single "layout" mapping is accepted in place of a "layouts" list. A
    resume with no layouts gets the default LaTeX and Markdown layouts.

    Args:
        resume: Resume mapping

    Returns:
        List of normalized layout dicts
    """
    layouts = resume.get("layouts")
    if not layouts and resume.get("layout"):
        layouts = [resume["layout"]]
    if not layouts:
        layouts = DEFAULT_RESUME_LAYOUTS

    language = normalize_locale_settings(resume.get("locale"))["language"]
    return [normalize_layout(layout, language) for layout in layouts]
