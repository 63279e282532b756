"""Blog API views - thin layer over services."""

import asyncio

from app.container import container
from app.services.blogs import CATEGORIES, author_name, filter_posts, popular_posts, read_time
from civic_client.blogs import BlogPost

from .schemas import BlogListResponse, BlogPostItem, BlogStatsResponse


def _to_item(post: BlogPost, with_content: bool = False) -> BlogPostItem:
    return BlogPostItem(
        id=post.id,
        slug=post.slug,
        title=post.title,
        excerpt=post.excerpt,
        category=post.category,
        author=author_name(post),
        published_at=post.published_at,
        read_time=read_time(post),
        views=post.views,
        tags=post.tags,
        cover_image=post.cover_image,
        content=post.content if with_content else None,
    )


def list_posts(query: str = "", category: str | None = None) -> BlogListResponse | None:
    """Search published posts. None means the blog is unavailable."""
    posts = asyncio.run(container.blogs.posts())
    if posts is None:
        return None

    return BlogListResponse(
        items=[_to_item(p) for p in filter_posts(posts, query, category)],
        featured=_to_item(posts[0]) if posts else None,
        popular=[_to_item(p) for p in popular_posts(posts)],
        stats=BlogStatsResponse(
            posts=len(posts),
            total_views=sum(p.views for p in posts),
            categories=len(CATEGORIES),
        ),
        categories=CATEGORIES,
    )


def get_post(slug: str) -> BlogPostItem | None:
    """Full post by slug. None means it could not be loaded."""
    post = asyncio.run(container.blogs.post(slug))
    return _to_item(post, with_content=True) if post else None
