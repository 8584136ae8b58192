"""Tests for the command line entrypoint.

Covers:
- Rendering post bodies and post rows to HTML
- Block dumps as JSON
- Index rendering with pagination from config
- First-load locale resolution and manual switching against a preference file
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner, Result

from thejournal.cli import main


def _config(tmp_path: Path, extra: str = "") -> Path:
    path = tmp_path / "thejournal.toml"
    path.write_text("version = 1\n" + extra, encoding="utf-8")
    return path


def _invoke(tmp_path: Path, *args: str, extra: str = "") -> Result:
    return CliRunner().invoke(main, ["--config", str(_config(tmp_path, extra)), *args])


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def test_render_markdown_body(tmp_path: Path) -> None:
    body = tmp_path / "first-post.md"
    body.write_text("## Hello\n\nSome *text*.", encoding="utf-8")
    out = tmp_path / "out" / "post.html"

    result = _invoke(tmp_path, "render", str(body), "-o", str(out), "--lang", "zh-tw")

    assert result.exit_code == 0, result.output
    assert f"Rendered: {out}" in result.output
    html = out.read_text(encoding="utf-8")
    assert '<h1 class="post-title">first-post</h1>' in html
    assert "<em>text</em>" in html
    assert "1 min read" in html
    assert "返回所有文章" in html


def test_render_post_row(tmp_path: Path) -> None:
    row = tmp_path / "row.json"
    row.write_text(json.dumps({"title": "From Row", "content": "**hi**", "author_name": "Ann"}), encoding="utf-8")
    out = tmp_path / "row.html"

    result = _invoke(tmp_path, "render", str(row), "-o", str(out), "--title", "Override")

    assert result.exit_code == 0, result.output
    html = out.read_text(encoding="utf-8")
    assert '<h1 class="post-title">Override</h1>' in html
    assert "<strong>hi</strong>" in html
    assert "Ann" in html


def test_render_rejects_non_object_row(tmp_path: Path) -> None:
    row = tmp_path / "row.json"
    row.write_text("[]", encoding="utf-8")

    result = _invoke(tmp_path, "render", str(row), "-o", str(tmp_path / "x.html"))

    assert result.exit_code == 1
    assert "Expected a JSON object" in result.output


def test_blocks_dump(tmp_path: Path) -> None:
    body = tmp_path / "body.txt"
    body.write_text("### Small\n\n- a\n    - **b**", encoding="utf-8")

    result = _invoke(tmp_path, "blocks", str(body))

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == [
        {"type": "heading", "level": 3, "spans": [{"type": "plain", "text": "Small"}]},
        {
            "type": "list",
            "items": [
                {"indent": 0, "spans": [{"type": "plain", "text": "a"}]},
                {"indent": 1, "spans": [{"type": "bold", "text": "b"}]},
            ],
        },
    ]


def test_index_uses_configured_page_size(tmp_path: Path) -> None:
    rows = [{"id": i, "title": f"Post {i}", "content": "x", "date": f"2024-01-{i + 1:02d}"} for i in range(5)]
    rows.append({"id": 99, "title": "Secret", "content": "x", "status": "draft", "user_id": "u1"})
    source = tmp_path / "posts.json"
    source.write_text(json.dumps(rows), encoding="utf-8")
    out = tmp_path / "index.html"

    result = _invoke(tmp_path, "index", str(source), "-o", str(out), "--page", "2", extra="[posts]\nper_page = 2\n")

    assert result.exit_code == 0, result.output
    assert "(page 2/3)" in result.output
    html = out.read_text(encoding="utf-8")
    # Newest first: page 2 holds the third and fourth newest posts.
    assert 'href="/post/2"' in html
    assert 'href="/post/1"' in html
    assert "Secret" not in html


def test_index_shows_own_drafts(tmp_path: Path) -> None:
    source = tmp_path / "posts.json"
    source.write_text(
        json.dumps([{"id": 1, "title": "Secret", "content": "x", "status": "draft", "user_id": "u1"}]),
        encoding="utf-8",
    )
    out = tmp_path / "index.html"

    result = _invoke(tmp_path, "index", str(source), "-o", str(out), "--user", "u1")

    assert result.exit_code == 0, result.output
    assert "Secret" in out.read_text(encoding="utf-8")


# ---------------------------------------------------------------------------
# Locale
# ---------------------------------------------------------------------------

def test_resolve_locale_first_visit_persists_inferred_language(tmp_path: Path) -> None:
    prefs = tmp_path / "prefs.json"

    result = _invoke(
        tmp_path, "resolve-locale", "--path", "/post/42", "--browser-locale", "zh-TW", "--prefs", str(prefs)
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["language: zh-tw", "location: /zh-tw/post/42", "redirect: replace"]
    assert json.loads(prefs.read_text(encoding="utf-8")) == {"userManualLanguage": "zh-tw"}


def test_resolve_locale_uses_configured_preference_file(tmp_path: Path) -> None:
    state = tmp_path / "state"
    state.mkdir()
    (state / "prefs.json").write_text(json.dumps({"lang": "en"}), encoding="utf-8")

    result = _invoke(
        tmp_path,
        "resolve-locale",
        "--path",
        "/zh-tw",
        "--browser-locale",
        "zh-TW",
        extra="[i18n]\npreference_file = 'state/prefs.json'\npreference_key = 'lang'\n",
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["language: en", "location: /", "redirect: replace"]


def test_resolve_locale_without_redirect(tmp_path: Path) -> None:
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"userManualLanguage": "en"}), encoding="utf-8")

    result = _invoke(tmp_path, "resolve-locale", "--path", "/post/1", "--prefs", str(prefs))

    assert result.output.splitlines() == ["language: en", "location: /post/1", "redirect: none"]


def test_switch_language_pushes_and_remembers(tmp_path: Path) -> None:
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"userManualLanguage": "en"}), encoding="utf-8")

    result = _invoke(tmp_path, "switch-language", "zh-tw", "--path", "/post/42?x=1", "--prefs", str(prefs))

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["language: zh-tw", "location: /zh-tw/post/42?x=1", "redirect: push"]
    assert json.loads(prefs.read_text(encoding="utf-8")) == {"userManualLanguage": "zh-tw"}


def test_invalid_config_is_reported(tmp_path: Path) -> None:
    body = tmp_path / "body.txt"
    body.write_text("text", encoding="utf-8")

    result = _invoke(tmp_path, "blocks", str(body), extra="[posts]\nper_page = 0\n")

    assert result.exit_code == 1
    assert "per_page" in result.output


def test_resolve_locale_accepts_relative_path(tmp_path: Path) -> None:
    prefs = tmp_path / "prefs.json"
    prefs.write_text(json.dumps({"userManualLanguage": "zh-tw"}), encoding="utf-8")

    result = _invoke(tmp_path, "resolve-locale", "--path", "post/1", "--prefs", str(prefs))

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["language: zh-tw", "location: /zh-tw/post/1", "redirect: replace"]


def test_resolve_locale_survives_undecodable_preferences(tmp_path: Path) -> None:
    prefs = tmp_path / "prefs.json"
    prefs.write_bytes(b'{"userManualLanguage": "\xff\xfe"}')

    result = _invoke(tmp_path, "resolve-locale", "--browser-locale", "zh-TW", "--prefs", str(prefs))

    assert result.exit_code == 0, result.output
    assert "language: zh-tw" in result.output


def test_resolve_locale_reports_recovery_link(tmp_path: Path) -> None:
    prefs = tmp_path / "prefs.json"

    ok = _invoke(
        tmp_path, "resolve-locale", "--path", "/#access_token=abc&type=recovery", "--prefs", str(prefs)
    )
    broken = _invoke(tmp_path, "resolve-locale", "--path", "/?type=recovery", "--prefs", str(prefs))

    assert ok.output.splitlines() == [
        "language: en",
        "location: /reset-password#access_token=abc&type=recovery",
        "redirect: replace",
        "recovery: valid",
    ]
    assert broken.output.splitlines()[-1] == "recovery: invalid link"


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------

def test_new_post_writes_insert_row(tmp_path: Path) -> None:
    body = tmp_path / "body.md"
    body.write_text(" ".join(["word"] * 450), encoding="utf-8")
    out = tmp_path / "row.json"

    result = _invoke(
        tmp_path, "new-post", "  My Post ", "--content", str(body), "-o", str(out),
        "--tags", "life, growth", "--draft", "--user", "u1",
    )

    assert result.exit_code == 0, result.output
    assert f"Created: {out} (3 min read)" in result.output
    row = json.loads(out.read_text(encoding="utf-8"))
    assert row["title"] == "My Post"
    assert row["tags"] == ["life", "growth"]
    assert row["status"] == "draft"
    assert row["user_id"] == "u1"
    assert row["author_name"] == "Anonymous"
    assert "id" not in row


def test_new_post_rejects_empty_body(tmp_path: Path) -> None:
    body = tmp_path / "body.md"
    body.write_text("   ", encoding="utf-8")

    result = _invoke(tmp_path, "new-post", "Title", "--content", str(body), "-o", str(tmp_path / "row.json"))

    assert result.exit_code == 1
    assert "Missing required field(s): content" in result.output
    assert not (tmp_path / "row.json").exists()


def test_edit_post_prints_only_changed_columns(tmp_path: Path) -> None:
    row = tmp_path / "post.json"
    row.write_text(
        json.dumps({"id": 5, "title": "Old", "content": "x", "author_name": "Ann", "author_avatar": "/ann.png"}),
        encoding="utf-8",
    )

    result = _invoke(tmp_path, "edit-post", str(row), "--title", "New", "--tags", "a,,b", "--author", "Bo")

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "id": "5",
        "columns": {"title": "New", "tags": ["a", "b"], "author_name": "Bo", "author_avatar": "/ann.png"},
    }
