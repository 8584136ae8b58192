"""Blog post model and its mapping to backend table rows."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date as _date
from typing import Any, Literal

from thejournal.errors import PostValidationError

PostStatus = Literal["draft", "published"]

PLACEHOLDER_IMAGE = "/placeholder.svg"
ANONYMOUS = "Anonymous"
DEFAULT_READ_TIME = "5 min read"
WORDS_PER_MINUTE = 200


@dataclass(slots=True)
class Author:
    name: str = ANONYMOUS
    avatar: str = PLACEHOLDER_IMAGE


@dataclass(slots=True)
class BlogPost:
    id: str
    title: str
    content: str
    excerpt: str = ""
    featured_image: str = PLACEHOLDER_IMAGE
    author: Author = field(default_factory=Author)
    date: str = ""
    read_time: str = DEFAULT_READ_TIME
    tags: list[str] = field(default_factory=list)
    status: PostStatus = "published"
    user_id: str | None = None

    @property
    def is_draft(self) -> bool:
        return self.status == "draft"

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> BlogPost:
        """Build a post from a ``posts`` table row, filling in display defaults."""
        return cls(
            id=str(row["id"]),
            title=row.get("title") or "",
            content=row.get("content") or "",
            excerpt=row.get("excerpt") or "",
            featured_image=row.get("featured_image") or PLACEHOLDER_IMAGE,
            author=Author(
                name=row.get("author_name") or ANONYMOUS,
                avatar=row.get("author_avatar") or PLACEHOLDER_IMAGE,
            ),
            date=row.get("date") or "",
            read_time=row.get("read_time") or DEFAULT_READ_TIME,
            tags=list(row.get("tags") or []),
            status=_coerce_status(row.get("status")),
            user_id=row.get("user_id") or None,
        )

    def to_row(self) -> dict[str, Any]:
        """Columns for an insert; the backend assigns ``id``."""
        return {
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "featured_image": self.featured_image,
            "author_name": self.author.name,
            "author_avatar": self.author.avatar,
            "date": self.date,
            "read_time": self.read_time,
            "tags": list(self.tags),
            "status": self.status,
            "user_id": self.user_id,
        }


_UPDATE_FIELDS = ("title", "excerpt", "content", "featured_image", "date", "read_time", "tags", "status")


def changed_columns(updates: dict[str, Any]) -> dict[str, Any]:
    """Translate a partial post update into table columns.

    Only keys present in *updates* are emitted; ``author`` expands to both
    author columns.
    """
    columns: dict[str, Any] = {}
    for key in _UPDATE_FIELDS:
        if key in updates:
            columns[key] = updates[key]
    if "tags" in columns:
        columns["tags"] = list(columns["tags"])
    if "status" in columns:
        columns["status"] = _coerce_status(columns["status"])

    author = updates.get("author")
    if author is not None:
        columns["author_name"] = author.name
        columns["author_avatar"] = author.avatar
    return columns


def estimate_read_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    words = len(content.split())
    minutes = max(1, math.ceil(words / words_per_minute))
    return f"{minutes} min read"


def parse_tags(raw: str) -> list[str]:
    """Split a comma-separated tag field, dropping blanks."""
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def new_post(
    title: str,
    content: str,
    *,
    excerpt: str = "",
    author_name: str = "",
    author_avatar: str = "",
    tags: str | list[str] = "",
    status: PostStatus = "published",
    featured_image: str = "",
    user_id: str | None = None,
    today: _date | None = None,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> BlogPost:
    """Validate a submission and build the post to insert.

    ``id`` is left empty until the backend assigns one.
    """
    missing = [name for name, value in (("title", title), ("content", content)) if not value.strip()]
    if missing:
        raise PostValidationError(f"Missing required field(s): {', '.join(missing)}")

    tag_list = parse_tags(tags) if isinstance(tags, str) else [t.strip() for t in tags if t.strip()]

    return BlogPost(
        id="",
        title=title.strip(),
        content=content,
        excerpt=excerpt,
        featured_image=featured_image or PLACEHOLDER_IMAGE,
        author=Author(name=author_name or ANONYMOUS, avatar=author_avatar or PLACEHOLDER_IMAGE),
        date=(today or _date.today()).isoformat(),
        read_time=estimate_read_time(content, words_per_minute),
        tags=tag_list,
        status=_coerce_status(status),
        user_id=user_id,
    )


def _coerce_status(value: Any) -> PostStatus:
    return "draft" if value == "draft" else "published"
