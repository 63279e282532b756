"""Blog API response schemas."""

import datetime

from pydantic import BaseModel


class BlogPostItem(BaseModel):
    """A blog post as listed; ``content`` is only set for a single post."""

    id: str
    slug: str
    title: str
    excerpt: str
    category: str
    author: str
    published_at: datetime.datetime | None
    read_time: int
    views: int
    tags: list[str]
    cover_image: str | None
    content: str | None = None


class BlogStatsResponse(BaseModel):
    posts: int
    total_views: int
    categories: int


class BlogListResponse(BaseModel):
    """Filtered posts plus the featured post, popular posts and stats over every post."""

    items: list[BlogPostItem]
    featured: BlogPostItem | None
    popular: list[BlogPostItem]
    stats: BlogStatsResponse
    categories: list[str]
