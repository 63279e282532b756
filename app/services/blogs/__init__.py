"""Blog services."""

from app.services.blogs.service import (
    CATEGORIES,
    BlogService,
    author_name,
    filter_posts,
    popular_posts,
    read_time,
)

__all__ = [
    "CATEGORIES",
    "BlogService",
    "author_name",
    "filter_posts",
    "popular_posts",
    "read_time",
]
