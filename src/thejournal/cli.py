"""thejournal CLI entrypoint."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from thejournal.config import JournalConfig, load_config
from thejournal.content.base import block_to_dict
from thejournal.content.md_parser import render as render_content
from thejournal.errors import JournalError, PostValidationError
from thejournal.i18n.languages import SUPPORTED_LANGUAGES
from thejournal.i18n.store import JsonFilePreferenceStore
from thejournal.posts.listing import Viewer, paginate, sort_posts, visible_posts
from thejournal.posts.model import Author, BlogPost, changed_columns, estimate_read_time, new_post, parse_tags
from thejournal.renderer.html_renderer import HTMLRenderer
from thejournal.routing.navigation import HistoryNavigator
from thejournal.routing.recovery import has_recovery_marker, is_recovery_path, recovery_tokens
from thejournal.routing.router import LocaleRouter, locale_session

_LANGUAGE_CHOICE = click.Choice(list(SUPPORTED_LANGUAGES), case_sensitive=False)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Path to thejournal.toml (default: search upward from the working directory)")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Render Journal posts and drive the locale router from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_config(config_path)
    except JournalError as e:
        raise click.ClickException(str(e)) from e


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output HTML path")
@click.option("--lang", "language", type=_LANGUAGE_CHOICE, default="en", show_default=True, help="UI language")
@click.option("--title", type=str, default=None, help="Override post title")
@click.pass_obj
def render(config: JournalConfig, input_path: Path, output: Path, language: str, title: str | None) -> None:
    """Render a post body (.md/.txt) or a post row (.json) into an HTML page."""
    post = _load_post(input_path, config)
    html = HTMLRenderer().render_post(post, language=language.lower(), title_override=title)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    click.echo(f"Rendered: {output}")


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def blocks(input_path: Path) -> None:
    """Print the blocks of a post body as JSON."""
    content = input_path.read_text(encoding="utf-8", errors="ignore")
    data = [block_to_dict(block) for block in render_content(content)]
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


@main.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output HTML path")
@click.option("--page", "page_number", type=int, default=1, show_default=True, help="Page number")
@click.option("--lang", "language", type=_LANGUAGE_CHOICE, default="en", show_default=True, help="UI language")
@click.option("--user", "user_id", type=str, default=None, help="Render as this signed-in user id")
@click.option("--admin", is_flag=True, help="Render with admin visibility")
@click.pass_obj
def index(
    config: JournalConfig,
    input_path: Path,
    output: Path,
    page_number: int,
    language: str,
    user_id: str | None,
    admin: bool,
) -> None:
    """Render the post index from a JSON array of post rows."""
    rows = _read_json(input_path)
    if not isinstance(rows, list):
        raise click.ClickException(f"Expected a JSON array of posts in {input_path.name}")

    viewer = Viewer(user_id=user_id, is_admin=admin)
    posts = sort_posts(visible_posts((BlogPost.from_row(row) for row in rows), viewer))
    page = paginate(posts, page_number, config.posts.per_page)
    html = HTMLRenderer().render_index(page, language=language.lower(), viewer=viewer)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")

    click.echo(f"Rendered: {output} (page {page.number}/{page.total_pages})")


@main.command("resolve-locale")
@click.option("--path", "href", type=str, default="/", show_default=True, help="Current URL path, query and fragment")
@click.option("--browser-locale", type=str, default=None, help="Locale reported by the browser, e.g. zh-TW")
@click.option("--prefs", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Preference file (default: from config)")
@click.pass_obj
def resolve_locale(config: JournalConfig, href: str, browser_locale: str | None, prefs: Path | None) -> None:
    """Run first-load language resolution for a visit to PATH."""
    navigator = HistoryNavigator(href)
    store = JsonFilePreferenceStore(prefs or config.i18n.preference_file)

    with locale_session(
        navigator,
        store,
        browser_locale=browser_locale,
        recovery_path=config.routing.recovery_path,
        preference_key=config.i18n.preference_key,
    ) as router:
        click.echo(f"language: {router.language}")
        click.echo(f"location: {navigator.location.href}")
        click.echo(f"redirect: {'replace' if router.redirect is not None else 'none'}")

        location = navigator.location
        if has_recovery_marker(location) and is_recovery_path(location.path, config.routing.recovery_path):
            click.echo(f"recovery: {'valid' if recovery_tokens(location) is not None else 'invalid link'}")


@main.command("switch-language")
@click.argument("language", type=_LANGUAGE_CHOICE)
@click.option("--path", "href", type=str, default="/", show_default=True, help="Current URL path, query and fragment")
@click.option("--prefs", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Preference file (default: from config)")
@click.pass_obj
def switch_language(config: JournalConfig, language: str, href: str, prefs: Path | None) -> None:
    """Manually switch to LANGUAGE from PATH and remember the choice."""
    navigator = HistoryNavigator(href)
    router = LocaleRouter(
        navigator,
        JsonFilePreferenceStore(prefs or config.i18n.preference_file),
        recovery_path=config.routing.recovery_path,
        preference_key=config.i18n.preference_key,
    )
    request = router.set_language(language.lower())
    click.echo(f"language: {router.language}")
    click.echo(f"location: {request.href}")
    click.echo("redirect: push")


@main.command("new-post")
@click.argument("title")
@click.option("--content", "content_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              required=True, help="Post body file")
@click.option("--output", "-o", type=click.Path(path_type=Path), required=True, help="Output JSON row path")
@click.option("--excerpt", type=str, default="", help="Short summary")
@click.option("--author", "author_name", type=str, default="", help="Author display name")
@click.option("--tags", type=str, default="", help="Comma-separated tags")
@click.option("--draft", is_flag=True, help="Save as draft instead of publishing")
@click.option("--user", "user_id", type=str, default=None, help="Owner user id")
@click.pass_obj
def new_post_command(
    config: JournalConfig,
    title: str,
    content_path: Path,
    output: Path,
    excerpt: str,
    author_name: str,
    tags: str,
    draft: bool,
    user_id: str | None,
) -> None:
    """Validate a submission and write the row to insert as JSON."""
    try:
        post = new_post(
            title,
            content_path.read_text(encoding="utf-8", errors="ignore"),
            excerpt=excerpt,
            author_name=author_name,
            tags=tags,
            status="draft" if draft else "published",
            user_id=user_id,
            words_per_minute=config.posts.words_per_minute,
        )
    except PostValidationError as e:
        raise click.ClickException(str(e)) from e

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(post.to_row(), ensure_ascii=False, indent=2) + "\n", encoding="utf-8")

    click.echo(f"Created: {output} ({post.read_time})")


@main.command("edit-post")
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--title", type=str, default=None, help="New title")
@click.option("--content", "content_path", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help="New post body file")
@click.option("--excerpt", type=str, default=None, help="New summary")
@click.option("--author", "author_name", type=str, default=None, help="New author display name")
@click.option("--tags", type=str, default=None, help="New comma-separated tags")
@click.option("--status", type=click.Choice(["draft", "published"]), default=None, help="New status")
@click.pass_obj
def edit_post(
    config: JournalConfig,
    input_path: Path,
    title: str | None,
    content_path: Path | None,
    excerpt: str | None,
    author_name: str | None,
    tags: str | None,
    status: str | None,
) -> None:
    """Print the columns an edit of the post row in INPUT would update."""
    post = _load_post(input_path, config)

    updates: dict[str, object] = {}
    if title is not None:
        if not title.strip():
            raise click.ClickException("Missing required field(s): title")
        updates["title"] = title.strip()
    if content_path is not None:
        content = content_path.read_text(encoding="utf-8", errors="ignore")
        updates["content"] = content
        updates["read_time"] = estimate_read_time(content, config.posts.words_per_minute)
    if excerpt is not None:
        updates["excerpt"] = excerpt
    if author_name is not None:
        updates["author"] = Author(name=author_name or post.author.name, avatar=post.author.avatar)
    if tags is not None:
        updates["tags"] = parse_tags(tags)
    if status is not None:
        updates["status"] = status

    click.echo(json.dumps({"id": post.id, "columns": changed_columns(updates)}, ensure_ascii=False, indent=2))


def _load_post(input_path: Path, config: JournalConfig) -> BlogPost:
    if input_path.name.lower().endswith(".json"):
        row = _read_json(input_path)
        if not isinstance(row, dict):
            raise click.ClickException(f"Expected a JSON object in {input_path.name}")
        row.setdefault("id", input_path.stem)
        return BlogPost.from_row(row)

    content = input_path.read_text(encoding="utf-8", errors="ignore")
    return BlogPost(
        id=input_path.stem,
        title=input_path.stem,
        content=content,
        read_time=estimate_read_time(content, config.posts.words_per_minute),
    )


def _read_json(input_path: Path) -> object:
    try:
        return json.loads(input_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON in {input_path.name}: {e}") from e


if __name__ == "__main__":  # pragma: no cover
    main()
