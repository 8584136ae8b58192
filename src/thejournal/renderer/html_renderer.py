"""Render posts and the post index into HTML pages."""

from __future__ import annotations

import html
from functools import partial
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from thejournal.content.base import Block, Bold, Heading, Italic, ListBlock, Paragraph, Quote, Span
from thejournal.content.md_parser import render as render_content
from thejournal.i18n.languages import Language, localize
from thejournal.i18n.translations import translate
from thejournal.posts.listing import ANONYMOUS_VIEWER, Page, Viewer, can_edit, split_featured
from thejournal.posts.model import BlogPost

# rem of left margin per list indent level
_LIST_INDENT_REM = 1.5


class HTMLRenderer:
    """Render post pages and the index with the bundled templates."""

    def __init__(self, template_dir: Path | None = None) -> None:
        if template_dir is None:
            template_dir = Path(__file__).resolve().parent.parent / "template"

        loader = FileSystemLoader(str(template_dir))
        self._env = Environment(loader=loader, autoescape=True, trim_blocks=True, lstrip_blocks=True)

    def render_post(
        self,
        post: BlogPost,
        *,
        language: Language = "en",
        viewer: Viewer = ANONYMOUS_VIEWER,
        title_override: str | None = None,
    ) -> str:
        template = self._env.get_template("post.html")
        return template.render(
            language=language,
            page_title=title_override or post.title or "Untitled",
            post=post,
            body_html=self.render_blocks(render_content(post.content)),
            can_edit=can_edit(post, viewer),
            t=partial(translate, language=language),
            href=partial(localize, language=language),
        )

    def render_index(
        self,
        page: Page,
        *,
        language: Language = "en",
        viewer: Viewer = ANONYMOUS_VIEWER,
    ) -> str:
        featured, latest = split_featured(page)
        template = self._env.get_template("index.html")
        return template.render(
            language=language,
            page_title="The Journal",
            page=page,
            featured=featured,
            latest=latest,
            viewer=viewer,
            t=partial(translate, language=language),
            href=partial(localize, language=language),
        )

    def render_blocks(self, blocks: list[Block]) -> str:
        return "\n".join(self._render_block(block) for block in blocks)

    def _render_block(self, block: Block) -> str:
        if isinstance(block, Heading):
            level = 3 if block.level == 3 else 2
            return f'<h{level} class="post-heading">{self._render_spans(block.spans)}</h{level}>'

        if isinstance(block, Quote):
            return f'<blockquote class="post-quote">{self._render_spans(block.spans)}</blockquote>'

        if isinstance(block, ListBlock):
            items = []
            for item in block.items:
                style = f' style="margin-left: {item.indent * _LIST_INDENT_REM}rem"' if item.indent else ""
                items.append(f"<li{style}>{self._render_spans(item.spans)}</li>")
            return '<ul class="post-list">' + "".join(items) + "</ul>"

        if isinstance(block, Paragraph):
            return f'<p class="post-paragraph">{self._render_spans(block.spans)}</p>'

        return ""

    def _render_spans(self, spans: list[Span]) -> str:
        parts: list[str] = []
        for span in spans:
            text = html.escape(span.text)
            if isinstance(span, Bold):
                parts.append(f"<strong>{text}</strong>")
            elif isinstance(span, Italic):
                parts.append(f"<em>{text}</em>")
            else:
                parts.append(text)
        return "".join(parts)
