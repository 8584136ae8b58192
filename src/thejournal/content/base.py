"""Block/span representation of a rendered post body."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Plain:
    text: str


@dataclass(slots=True)
class Bold:
    text: str


@dataclass(slots=True)
class Italic:
    text: str


Span = Plain | Bold | Italic


@dataclass(slots=True)
class Heading:
    level: int
    spans: list[Span] = field(default_factory=list)


@dataclass(slots=True)
class Quote:
    spans: list[Span] = field(default_factory=list)


@dataclass(slots=True)
class ListItem:
    spans: list[Span] = field(default_factory=list)
    # Visual nesting only; items never form sub-lists.
    indent: int = 0


@dataclass(slots=True)
class ListBlock:
    items: list[ListItem] = field(default_factory=list)


@dataclass(slots=True)
class Paragraph:
    spans: list[Span] = field(default_factory=list)


Block = Heading | Quote | ListBlock | Paragraph


def plain_text(spans: Iterable[Span]) -> str:
    """Concatenate span text with all inline markers removed."""
    return "".join(span.text for span in spans)


def block_kind(block: Block) -> str:
    if isinstance(block, Heading):
        return "heading"
    if isinstance(block, Quote):
        return "quote"
    if isinstance(block, ListBlock):
        return "list"
    return "paragraph"


def span_kind(span: Span) -> str:
    if isinstance(span, Bold):
        return "bold"
    if isinstance(span, Italic):
        return "italic"
    return "plain"


def block_to_dict(block: Block) -> dict[str, Any]:
    """JSON-friendly form of *block*, tagged with ``type``."""
    data: dict[str, Any] = {"type": block_kind(block)}
    if isinstance(block, ListBlock):
        data["items"] = [
            {"indent": item.indent, "spans": [_span_to_dict(span) for span in item.spans]}
            for item in block.items
        ]
        return data
    if isinstance(block, Heading):
        data["level"] = block.level
    data["spans"] = [_span_to_dict(span) for span in block.spans]
    return data


def _span_to_dict(span: Span) -> dict[str, str]:
    return {"type": span_kind(span), "text": span.text}
