"""Blog API client."""

from civic_client.blogs.client import BlogClient
from civic_client.blogs.schemas import BlogAuthor, BlogPost

__all__ = [
    "BlogClient",
    "BlogAuthor",
    "BlogPost",
]
