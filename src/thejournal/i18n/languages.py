"""Supported UI languages and the URL prefix rules that encode them."""

from __future__ import annotations

from typing import Literal

Language = Literal["en", "zh-tw"]

SUPPORTED_LANGUAGES: tuple[Language, ...] = ("en", "zh-tw")
DEFAULT_LANGUAGE: Language = "en"

# Storage slot for the persisted language choice.
PREFERENCE_KEY = "userManualLanguage"

ZH_TW_PREFIX = "/zh-tw"


def coerce_language(value: object) -> Language | None:
    """Return *value* if it names a supported language, else ``None``."""
    if value == "en":
        return "en"
    if value == "zh-tw":
        return "zh-tw"
    return None


def detect_browser_language(locale_tag: str | None) -> Language:
    """Map a runtime locale tag such as ``zh-TW`` or ``en-US`` to a UI language.

    Every Chinese variant maps to ``zh-tw``; anything else, including a
    missing tag, maps to English.
    """
    if locale_tag and locale_tag.strip().lower().startswith("zh"):
        return "zh-tw"
    return DEFAULT_LANGUAGE


def has_zh_tw_prefix(path: str) -> bool:
    return path == ZH_TW_PREFIX or path.startswith(ZH_TW_PREFIX + "/")


def language_from_path(path: str) -> Language:
    return "zh-tw" if has_zh_tw_prefix(path) else "en"


def path_for_language(path: str, language: Language) -> str:
    """Rewrite *path* so its prefix matches *language*.

    ``/`` <-> ``/zh-tw`` and ``/post/1`` <-> ``/zh-tw/post/1``. Paths that
    already match are returned unchanged.
    """
    path = path or "/"
    if language == "zh-tw":
        if has_zh_tw_prefix(path):
            return path
        return ZH_TW_PREFIX + ("" if path == "/" else path)

    if has_zh_tw_prefix(path):
        return path[len(ZH_TW_PREFIX):] or "/"
    return path


def localize(path: str, language: Language) -> str:
    """Prefix an in-app link target for *language*.

    Link targets are always written unprefixed (``/post/42``), so this only
    ever adds the ``/zh-tw`` prefix.
    """
    if language == "zh-tw":
        return ZH_TW_PREFIX + ("" if path == "/" else path)
    return path
