"""
Localization Registries

Centralized registry for loading and caching per-locale translation tables.
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_TRANSLATIONS_PATH = Path(__file__).parent / "data"
TRANSLATIONS_PATH = Path(os.getenv("VITAE_TRANSLATIONS_PATH") or DEFAULT_TRANSLATIONS_PATH)

DEFAULT_LOCALE = "en"

# Locale code -> human-readable name
SUPPORTED_LOCALES = {
    "en": "English",
    "zh-hans": "Simplified Chinese",
    "zh-hant-hk": "Traditional Chinese (Hong Kong)",
    "zh-hant-tw": "Traditional Chinese (Taiwan)",
    "es": "Spanish",
    "fr": "French",
    "no": "Norwegian",
}

CJK_LOCALES = ("zh-hans", "zh-hant-hk", "zh-hant-tw")


class TranslationRegistry:
    """
    Registry for loading and caching translation tables.

    Tables are stored as {translations_path}/{locale}.yaml, one mapping of
    category -> key -> term per locale. Each table is read from disk at most
    once per registry and must be treated as read-only by callers.
    """

    def __init__(self, translations_path: Path = None):
        """
        Initialize the translation registry.

        Args:
            translations_path: Directory holding the locale YAML files. Defaults
                               to VITAE_TRANSLATIONS_PATH from environment
        """
        if translations_path is None:
            translations_path = TRANSLATIONS_PATH

        self.translations_path = translations_path
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get_table(self, locale: str) -> Dict[str, Any]:
        """
        Get the translation table for a locale, loading and caching it if necessary.

        Args:
            locale: Supported locale code (e.g., 'zh-hans')

        Returns:
            Dict of category -> key -> term

        Raises:
            FileNotFoundError: If the table file doesn't exist
        """
        if locale in self._cache:
            return self._cache[locale]

        table_path = self.get_table_path(locale)

        if not table_path.exists():
            raise FileNotFoundError(f"Translation table not found for locale '{locale}' at {table_path}")

        table = OmegaConf.load(table_path)
        table_dict = OmegaConf.to_container(table, resolve=True)

        self._cache[locale] = table_dict
        return table_dict

    def get_table_path(self, locale: str) -> Path:
        """Get the file path for a locale's translation table."""
        return self.translations_path / f"{locale}.yaml"

    def available_locales(self) -> List[str]:
        """List locales that have a table on disk."""
        return sorted(path.stem for path in self.translations_path.glob("*.yaml"))

    def clear_cache(self):
        """Clear the translation table cache."""
        self._cache.clear()

    def is_cached(self, locale: str) -> bool:
        """Check if a locale's table is in the cache."""
        return locale in self._cache
