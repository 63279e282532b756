"""Blog API client."""

from civic_client.base import BaseClient
from civic_client.blogs.schemas import BlogPost


class BlogClient(BaseClient):
    """Client for public blog endpoints."""

    async def posts(self, category: str | None = None, limit: int = 50) -> list[BlogPost]:
        """GET /blogs - published posts, newest first."""
        path = f"blogs?limit={limit}"
        if category:
            path += f"&category={category}"
        data = await self._get(path)
        return [BlogPost.model_validate(p) for p in data.get("blogs", [])]

    async def post(self, slug: str) -> BlogPost:
        """GET /blogs/{slug} - full post (the server counts this as a view)."""
        data = await self._get(f"blogs/{slug}")
        return BlogPost.model_validate(data)
