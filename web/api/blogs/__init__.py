"""Blog API."""

from web.api.blogs.views import get_post, list_posts

__all__ = [
    "list_posts",
    "get_post",
]
