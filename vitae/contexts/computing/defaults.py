"""
Default values for VITAE resume structure.

Provides shared defaults used by:
- normalizer.py (fill missing sections, fields, locale and layouts)
- transform.py (which sections carry which computed fields)
"""

from typing import Any, Dict, List

# Fields of each content section. basics and location are single mappings,
# every other section is a list of mappings with these fields.
SECTION_FIELDS: Dict[str, List[str]] = {
    "basics": ["name", "headline", "phone", "email", "url", "summary"],
    "location": ["address", "city", "region", "country", "postalCode"],
    "profiles": ["network", "username", "url"],
    "education": [
        "institution",
        "area",
        "degree",
        "score",
        "courses",
        "url",
        "startDate",
        "endDate",
        "summary",
    ],
    "work": ["name", "position", "url", "startDate", "endDate", "keywords", "summary"],
    "languages": ["language", "fluency", "keywords"],
    "skills": ["name", "level", "keywords"],
    "awards": ["title", "awarder", "date", "summary"],
    "certificates": ["name", "issuer", "date", "url"],
    "publications": ["name", "publisher", "releaseDate", "url", "summary"],
    "references": ["name", "relationship", "email", "phone", "summary"],
    "projects": ["name", "description", "url", "startDate", "endDate", "keywords", "summary"],
    "interests": ["name", "keywords"],
    "volunteer": ["organization", "position", "url", "startDate", "endDate", "summary"],
}

SINGLE_SECTIONS = ("basics", "location")

# Fields holding lists of strings rather than a single value
LIST_FIELDS = ("courses", "keywords")

# Fields holding a stored rich-text document
RICH_TEXT_FIELDS = ("summary",)

# Sections whose entries span a period of time
DATED_SECTIONS = ("education", "projects", "volunteer", "work")

# Sections whose entries carry one date, and the field holding it
SINGLE_DATE_FIELDS = {
    "awards": "date",
    "certificates": "date",
    "publications": "releaseDate",
}

KEYWORD_SECTIONS = ("interests", "languages", "projects", "skills", "work")

SUMMARY_SECTIONS = (
    "basics",
    "awards",
    "education",
    "projects",
    "publications",
    "references",
    "volunteer",
    "work",
)

# Section names that can be retitled through layout.sections.aliases
SECTION_IDS = sorted(SECTION_FIELDS)

DEFAULT_RESUME_LOCALE = {"language": "en"}

DEFAULT_TOP_BOTTOM_MARGIN = "2.5cm"
DEFAULT_LEFT_RIGHT_MARGIN = "1.5cm"

DEFAULT_LATEX_LAYOUT: Dict[str, Any] = {
    "engine": "latex",
    "template": "moderncv-banking",
    "typography": {
        "fontSize": "10pt",
        "links": {"underline": False},
    },
    "page": {
        "margins": {
            "top": DEFAULT_TOP_BOTTOM_MARGIN,
            "bottom": DEFAULT_TOP_BOTTOM_MARGIN,
            "left": DEFAULT_LEFT_RIGHT_MARGIN,
            "right": DEFAULT_LEFT_RIGHT_MARGIN,
        },
        "showPageNumbers": False,
    },
    "advanced": {
        "fontspec": {"numbers": "Auto"},
        "showIcons": True,
    },
    "sections": {"aliases": {}},
}

DEFAULT_HTML_LAYOUT: Dict[str, Any] = {
    "engine": "html",
    "template": "calm",
    "typography": {"fontSize": "16px"},
    "advanced": {
        "showIcons": True,
        "title": "",
        "footer": "Generated by vitae",
    },
    "sections": {"aliases": {}},
}

DEFAULT_MARKDOWN_LAYOUT: Dict[str, Any] = {
    "engine": "markdown",
    "template": "basic",
    "sections": {"aliases": {}},
}

DEFAULT_LAYOUTS_BY_ENGINE: Dict[str, Dict[str, Any]] = {
    "latex": DEFAULT_LATEX_LAYOUT,
    "html": DEFAULT_HTML_LAYOUT,
    "markdown": DEFAULT_MARKDOWN_LAYOUT,
}

# Layouts used when a resume declares none
DEFAULT_RESUME_LAYOUTS = [DEFAULT_LATEX_LAYOUT, DEFAULT_MARKDOWN_LAYOUT]
