"""Markdown-subset renderer for post bodies.

Supported syntax is deliberately small: ``## `` / ``### `` headings, ``> ``
quotes (one block per line), ``-`` / ``+`` bullet lists with cosmetic
indentation, paragraphs, and inline ``**bold**`` / ``*italic*``. Anything else
is paragraph text.
"""

from __future__ import annotations

import re

from .base import Block, Heading, ListBlock, ListItem, Paragraph, Quote
from .inline import parse_inline

_SEGMENT_SPLIT_RE = re.compile(r"\n{2,}")

# Columns of leading whitespace per visual nesting level.
_INDENT_WIDTH = 4


def render(content: str) -> list[Block]:
    """Render a post body into an ordered list of blocks. Never raises."""
    # Bodies coming back from storage may carry escaped newlines.
    text = content.replace("\\n", "\n")

    blocks: list[Block] = []
    for segment in _SEGMENT_SPLIT_RE.split(text):
        blocks.extend(_render_segment(segment.split("\n")))
    return blocks


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def _render_segment(lines: list[str]) -> list[Block]:
    blocks: list[Block] = []
    i = 0

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        if not stripped:
            i += 1
            continue

        if stripped.startswith("### "):
            blocks.append(Heading(level=3, spans=parse_inline(stripped[4:])))
            i += 1
            continue

        if stripped.startswith("## "):
            blocks.append(Heading(level=2, spans=parse_inline(stripped[3:])))
            i += 1
            continue

        if stripped.startswith("> "):
            blocks.append(Quote(spans=parse_inline(stripped[2:])))
            i += 1
            continue

        if _list_marker(line) is not None:
            items: list[ListItem] = []
            while i < len(lines):
                marker = _list_marker(lines[i])
                if marker is None:
                    break
                indent, body = marker
                items.append(ListItem(spans=parse_inline(body), indent=indent))
                i += 1
            blocks.append(ListBlock(items=items))
            continue

        paragraph_lines: list[str] = []
        while i < len(lines) and not _ends_paragraph(lines[i]):
            paragraph_lines.append(lines[i].strip())
            i += 1
        blocks.append(Paragraph(spans=parse_inline(" ".join(paragraph_lines))))

    return blocks


def _ends_paragraph(line: str) -> bool:
    stripped = line.strip()
    return (
        not stripped
        or stripped.startswith(("## ", "### ", "> "))
        or _list_marker(line) is not None
    )


def _list_marker(line: str) -> tuple[int, str] | None:
    """Return ``(indent_level, item_text)`` for a ``-``/``+`` bullet line."""
    body = line.lstrip()
    if len(body) < 2 or body[0] not in "-+" or not body[1].isspace():
        return None
    leading = len(line) - len(body)
    return leading // _INDENT_WIDTH, body[2:]
