"""
Computing Context

Responsibilities:
- Normalizes loaded resumes (missing sections, fields, locale and layouts)
- Derives display strings once per resume and layout: localized dates and
  date ranges, joined courses and keywords, degree/area/score, full address,
  header links, localized option values, rich-text summaries, section titles

Owns: Resume normalization, computed fields, layout defaults
Never: Chooses templates or composes whole documents
"""

from vitae.contexts.computing.dates import get_date_range, localize_date, parse_date
from vitae.contexts.computing.fields import (
    compose_basics_url,
    compose_degree_area_and_score,
    compose_full_address,
    compose_profile_url,
    compose_section_names,
    get_icon,
    join_list,
    render_summary,
)
from vitae.contexts.computing.normalizer import (
    get_template_id,
    normalize_layout,
    normalize_layouts,
    normalize_locale_settings,
    normalize_resume_content,
)
from vitae.contexts.computing.transform import transform_resume, transform_resume_content

__all__ = [
    # Dates
    "get_date_range",
    "localize_date",
    "parse_date",
    # Field composers
    "compose_basics_url",
    "compose_degree_area_and_score",
    "compose_full_address",
    "compose_profile_url",
    "compose_section_names",
    "get_icon",
    "join_list",
    "render_summary",
    # Normalization
    "get_template_id",
    "normalize_layout",
    "normalize_layouts",
    "normalize_locale_settings",
    "normalize_resume_content",
    # Orchestration
    "transform_resume",
    "transform_resume_content",
]
