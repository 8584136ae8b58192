"""Inline ``**bold**`` / ``*italic*`` span scanner."""

from __future__ import annotations

from typing import NamedTuple

from .base import Bold, Italic, Plain, Span

# Marker content never crosses one of these.
_LINE_BREAKS = frozenset("\n\r\u2028\u2029")


class _Marker(NamedTuple):
    start: int
    end: int
    inner: str
    kind: type[Bold] | type[Italic]


def parse_inline(text: str) -> list[Span]:
    """Split *text* into plain, bold and italic spans.

    The leftmost marker wins; a bold and an italic candidate starting at the
    same offset resolve to bold. Unterminated markers stay literal. Characters
    already consumed before the cursor are not visible to the single-asterisk
    neighbour checks, so ``**a***b*`` yields ``Bold("a")`` then ``Italic("b")``.
    """
    spans: list[Span] = []
    pos = 0

    while pos < len(text):
        marker = _next_marker(text, pos)
        if marker is None:
            spans.append(Plain(text[pos:]))
            break

        if marker.start > pos:
            spans.append(Plain(text[pos:marker.start]))
        spans.append(marker.kind(marker.inner))
        pos = marker.end

    return spans or [Plain(text)]


def _next_marker(text: str, pos: int) -> _Marker | None:
    bold = _find_bold(text, pos)
    italic = _find_italic(text, pos)
    if bold is not None and italic is not None:
        return bold if bold.start <= italic.start else italic
    return bold or italic


def _find_bold(text: str, pos: int) -> _Marker | None:
    """Leftmost ``**x**`` at or after *pos*, closed by the nearest ``**``."""
    start = text.find("**", pos)
    while start != -1:
        cursor = start + 2
        while cursor < len(text) and text[cursor] not in _LINE_BREAKS:
            if cursor > start + 2 and text.startswith("**", cursor):
                return _Marker(start, cursor + 2, text[start + 2:cursor], Bold)
            cursor += 1
        start = text.find("**", start + 1)
    return None


def _find_italic(text: str, pos: int) -> _Marker | None:
    """Leftmost ``*x*`` whose asterisks are not part of a ``**`` run."""
    start = text.find("*", pos)
    while start != -1:
        if _is_single_star(text, pos, start):
            cursor = start + 1
            while cursor < len(text) and text[cursor] not in _LINE_BREAKS:
                if cursor > start + 1 and _is_single_star(text, pos, cursor):
                    return _Marker(start, cursor + 1, text[start + 1:cursor], Italic)
                cursor += 1
        start = text.find("*", start + 1)
    return None


def _is_single_star(text: str, pos: int, index: int) -> bool:
    if text[index] != "*":
        return False
    if index > pos and text[index - 1] == "*":
        return False
    if index + 1 < len(text) and text[index + 1] == "*":
        return False
    return True
