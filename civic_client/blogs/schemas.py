"""Blog API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class BlogAuthor(BaseModel):
    first_name: str = Field(alias="firstName", default="")
    last_name: str = Field(alias="lastName", default="")

    class Config:
        populate_by_name = True


class BlogPost(BaseModel):
    """A published blog post. List responses omit ``content``."""

    id: str
    slug: str
    title: str
    excerpt: str = ""
    content: str | None = None
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    views: int = 0
    cover_image: str | None = Field(alias="coverImage", default=None)
    published_at: datetime | None = Field(alias="publishedAt", default=None)
    read_time: int | None = Field(alias="readTime", default=None)
    author: BlogAuthor | None = None

    class Config:
        populate_by_name = True
