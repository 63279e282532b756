"""Blog service - published posts from the platform API."""

from loguru import logger

from civic_client import BlogClient, safe_request
from civic_client.blogs import BlogPost

CATEGORIES = ["News", "Analysis", "Opinion", "Education", "Rankings", "Accountability"]
DEFAULT_AUTHOR = "Editorial Team"
WORDS_PER_MINUTE = 200


def filter_posts(posts: list[BlogPost], query: str = "", category: str | None = None) -> list[BlogPost]:
    """Substring search on title/excerpt plus exact category match."""
    needle = query.lower()
    return [
        p
        for p in posts
        if (needle in p.title.lower() or needle in p.excerpt.lower()) and (not category or p.category == category)
    ]


def popular_posts(posts: list[BlogPost], limit: int = 5) -> list[BlogPost]:
    """Most viewed posts first."""
    return sorted(posts, key=lambda p: p.views, reverse=True)[:limit]


def author_name(post: BlogPost) -> str:
    if post.author is None:
        return DEFAULT_AUTHOR
    return f"{post.author.first_name} {post.author.last_name}".strip() or DEFAULT_AUTHOR


def read_time(post: BlogPost) -> int:
    """Minutes to read; estimated from the text when the server gives none."""
    if post.read_time:
        return post.read_time
    words = len((post.content or post.excerpt).split())
    return max(1, round(words / WORDS_PER_MINUTE))


class BlogService:
    """Blog business logic."""

    def __init__(self, client_factory=BlogClient):
        self._client_factory = client_factory

    async def posts(self, category: str | None = None) -> list[BlogPost] | None:
        """Published posts, or None when the blog is unavailable."""
        async with self._client_factory() as client:
            posts = await safe_request(client.posts(category))
        if posts is not None:
            logger.debug("Loaded {} blog posts", len(posts))
        return posts

    async def post(self, slug: str) -> BlogPost | None:
        async with self._client_factory() as client:
            return await safe_request(client.post(slug))
