"""
Translation Resolver

Single lookup path for every localized string a resume needs: option values
(degrees, fluencies, skill levels, countries, section names) and template
terms (punctuation, labels, date conventions) alike.

Fallback order for any key: requested locale, then English, then the key
itself. An unsupported or empty locale is treated as English.
"""

from typing import Any, Dict, Optional

from omegaconf import OmegaConf

from vitae.contexts.localization.registries import (
    CJK_LOCALES,
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    TranslationRegistry,
)

_registry = TranslationRegistry()
_resolved: Dict[str, Dict[str, Any]] = {}


def get_registry() -> TranslationRegistry:
    """Return the process-wide translation registry."""
    return _registry


def normalize_locale(locale: Optional[str]) -> str:
    """
    Map a requested locale code onto a supported one.

    Args:
        locale: Locale code, may be None, empty or unsupported

    Returns:
        The code itself if supported, otherwise "en"
    """
    if locale and locale in SUPPORTED_LOCALES:
        return locale
    return DEFAULT_LOCALE


def is_cjk_locale(locale: Optional[str]) -> bool:
    """Check whether a locale is one of the Chinese locales."""
    return normalize_locale(locale) in CJK_LOCALES


def resolve(locale: Optional[str]) -> Dict[str, Any]:
    """
    Get the full term set for a locale.

    The locale's table is merged over the English table, so every category
    and key present in English is present in the result.

    Args:
        locale: Locale code, may be None, empty or unsupported

    Returns:
        Dict of category -> key -> term (shared; do not mutate)
    """
    code = normalize_locale(locale)

    if code in _resolved:
        return _resolved[code]

    english = _registry.get_table(DEFAULT_LOCALE)
    if code == DEFAULT_LOCALE:
        merged = english
    else:
        merged = OmegaConf.to_container(
            OmegaConf.merge(OmegaConf.create(english), OmegaConf.create(_registry.get_table(code))),
            resolve=True,
        )

    _resolved[code] = merged
    return merged


def get_term(locale: Optional[str], category: str, key: Optional[str]) -> str:
    """
    Translate one key of one category.

    Args:
        locale: Locale code, may be None, empty or unsupported
        category: Table category (e.g., "degrees", "sections", "terms")
        key: Key within the category, usually the English option value

    Returns:
        Localized term, the English term if the locale lacks it, or the key
        itself if neither table has it. An empty key yields "".

    Example:
        >>> get_term("zh-hans", "degrees", "Master")
        '硕士'
        >>> get_term("fr", "degrees", "Astronaut")
        'Astronaut'
    """
    if not key:
        return ""

    value = resolve(locale).get(category, {}).get(key)
    if value is None:
        return key
    return str(value)


def get_punctuations(locale: Optional[str]) -> Dict[str, str]:
    """Get the comma, colon and list separator for a locale."""
    return resolve(locale)["punctuations"]


def get_terms(locale: Optional[str]) -> Dict[str, str]:
    """Get the template label terms (Courses, Keywords, Score, ...) for a locale."""
    return resolve(locale)["terms"]


def get_date_conventions(locale: Optional[str]) -> Dict[str, Any]:
    """Get the month names, date format and present-phrasing for a locale."""
    return resolve(locale)["dates"]
