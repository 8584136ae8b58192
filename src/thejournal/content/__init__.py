"""Post body rendering package."""

from .base import (
    Block,
    Bold,
    Heading,
    Italic,
    ListBlock,
    ListItem,
    Paragraph,
    Plain,
    Quote,
    Span,
    block_to_dict,
    plain_text,
)
from .inline import parse_inline
from .md_parser import render

__all__ = [
    "Block",
    "block_to_dict",
    "Bold",
    "Heading",
    "Italic",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "Plain",
    "Quote",
    "Span",
    "parse_inline",
    "plain_text",
    "render",
]
