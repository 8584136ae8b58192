"""Post model, submissions and index listing."""

from .listing import ANONYMOUS_VIEWER, Page, Viewer, can_edit, paginate, sort_posts, split_featured, visible_posts
from .model import Author, BlogPost, PostStatus, changed_columns, estimate_read_time, new_post, parse_tags

__all__ = [
    "ANONYMOUS_VIEWER",
    "Author",
    "BlogPost",
    "Page",
    "PostStatus",
    "Viewer",
    "can_edit",
    "changed_columns",
    "estimate_read_time",
    "new_post",
    "paginate",
    "parse_tags",
    "sort_posts",
    "split_featured",
    "visible_posts",
]
