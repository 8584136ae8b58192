from __future__ import annotations

import pytest

from thejournal.i18n import (
    TRANSLATIONS,
    coerce_language,
    detect_browser_language,
    language_from_path,
    localize,
    path_for_language,
    translate,
)


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("zh-TW", "zh-tw"),
        ("zh-CN", "zh-tw"),
        ("ZH", "zh-tw"),
        ("en-US", "en"),
        ("fr", "en"),
        ("", "en"),
        (None, "en"),
    ],
)
def test_detect_browser_language(tag: str | None, expected: str) -> None:
    assert detect_browser_language(tag) == expected


def test_coerce_language_accepts_only_supported_values() -> None:
    assert coerce_language("en") == "en"
    assert coerce_language("zh-tw") == "zh-tw"
    assert coerce_language("zh-TW") is None
    assert coerce_language("fr") is None
    assert coerce_language(None) is None


def test_language_from_path_requires_whole_segment() -> None:
    assert language_from_path("/zh-tw") == "zh-tw"
    assert language_from_path("/zh-tw/post/42") == "zh-tw"
    assert language_from_path("/") == "en"
    assert language_from_path("/post/42") == "en"
    assert language_from_path("/zh-twister") == "en"


@pytest.mark.parametrize(
    ("path", "language", "expected"),
    [
        ("/", "zh-tw", "/zh-tw"),
        ("/post/42", "zh-tw", "/zh-tw/post/42"),
        ("/zh-tw/post/42", "zh-tw", "/zh-tw/post/42"),
        ("/zh-tw", "en", "/"),
        ("/zh-tw/", "en", "/"),
        ("/zh-tw/post/42", "en", "/post/42"),
        ("/auth", "en", "/auth"),
        ("", "en", "/"),
    ],
)
def test_path_for_language(path: str, language: str, expected: str) -> None:
    assert path_for_language(path, language) == expected


def test_localize_only_prefixes_for_chinese() -> None:
    assert localize("/", "zh-tw") == "/zh-tw"
    assert localize("/post/1", "zh-tw") == "/zh-tw/post/1"
    assert localize("/post/1", "en") == "/post/1"


def test_translate_and_missing_key_fallback() -> None:
    assert translate("post.back", "en") == "Back to all posts"
    assert translate("post.back", "zh-tw") == "返回所有文章"
    assert translate("no.such.key", "zh-tw") == "no.such.key"


def test_catalogs_share_the_same_keys() -> None:
    assert set(TRANSLATIONS["en"]) == set(TRANSLATIONS["zh-tw"])
