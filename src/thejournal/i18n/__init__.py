"""Languages, UI strings and preference persistence."""

from .languages import (
    DEFAULT_LANGUAGE,
    PREFERENCE_KEY,
    SUPPORTED_LANGUAGES,
    Language,
    coerce_language,
    detect_browser_language,
    language_from_path,
    localize,
    path_for_language,
)
from .store import JsonFilePreferenceStore, MemoryPreferenceStore, PreferenceStore
from .translations import TRANSLATIONS, translate

__all__ = [
    "DEFAULT_LANGUAGE",
    "PREFERENCE_KEY",
    "SUPPORTED_LANGUAGES",
    "TRANSLATIONS",
    "JsonFilePreferenceStore",
    "Language",
    "MemoryPreferenceStore",
    "PreferenceStore",
    "coerce_language",
    "detect_browser_language",
    "language_from_path",
    "localize",
    "path_for_language",
    "translate",
]
