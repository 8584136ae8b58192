"""Which posts a viewer sees, and how the index page slices them."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from .model import BlogPost

DEFAULT_PER_PAGE = 9


@dataclass(frozen=True, slots=True)
class Viewer:
    user_id: str | None = None
    is_admin: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None


ANONYMOUS_VIEWER = Viewer()


@dataclass(slots=True)
class Page:
    posts: list[BlogPost] = field(default_factory=list)
    number: int = 1
    total_pages: int = 1
    total_posts: int = 0

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


def can_view(post: BlogPost, viewer: Viewer) -> bool:
    if not post.is_draft:
        return True
    return can_edit(post, viewer)


def can_edit(post: BlogPost, viewer: Viewer) -> bool:
    if viewer.is_admin:
        return True
    return viewer.user_id is not None and viewer.user_id == post.user_id


def visible_posts(posts: Iterable[BlogPost], viewer: Viewer = ANONYMOUS_VIEWER) -> list[BlogPost]:
    """Published posts, plus drafts the viewer wrote (admins see every draft)."""
    return [post for post in posts if can_view(post, viewer)]


def sort_posts(posts: Iterable[BlogPost]) -> list[BlogPost]:
    """Newest first. ISO dates sort lexically; ties keep their input order."""
    return sorted(posts, key=lambda post: post.date, reverse=True)


def paginate(posts: list[BlogPost], page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page:
    if per_page < 1:
        raise ValueError("per_page must be >= 1")
    total_pages = max(1, math.ceil(len(posts) / per_page))
    number = min(max(1, page), total_pages)
    start = (number - 1) * per_page
    return Page(
        posts=posts[start:start + per_page],
        number=number,
        total_pages=total_pages,
        total_posts=len(posts),
    )


def split_featured(page: Page) -> tuple[BlogPost | None, list[BlogPost]]:
    """The first page leads with a featured post; later pages are a plain grid."""
    if page.number != 1 or not page.posts:
        return None, list(page.posts)
    return page.posts[0], page.posts[1:]
