"""
Localization Context

Responsibilities:
- Holds the per-locale translation tables (degrees, languages, fluencies,
  skill levels, countries, section names, punctuation, labels, date conventions)
- Resolves any localized string with a uniform locale -> English -> key fallback

Owns: Translation data, locale normalization
Never: Formats resume fields or emits markup
"""

from vitae.contexts.localization.registries import (
    CJK_LOCALES,
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    TranslationRegistry,
)
from vitae.contexts.localization.resolver import (
    get_date_conventions,
    get_punctuations,
    get_term,
    get_terms,
    is_cjk_locale,
    normalize_locale,
    resolve,
)

__all__ = [
    "CJK_LOCALES",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "TranslationRegistry",
    "get_date_conventions",
    "get_punctuations",
    "get_term",
    "get_terms",
    "is_cjk_locale",
    "normalize_locale",
    "resolve",
]
