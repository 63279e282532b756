"""Politician profile API schemas."""

from pydantic import BaseModel, Field


class ProfileItem(BaseModel):
    """A votable project, promise or controversy."""

    id: str
    title: str
    description: str | None = None
    status: str | None = None
    upvotes: int = 0
    downvotes: int = 0


class PoliticianProfile(BaseModel):
    """GET /politicians/{id}/profile payload (votable parts only)."""

    promises: list[ProfileItem] = Field(default_factory=list)
    projects: list[ProfileItem] = Field(default_factory=list)
    controversies: list[ProfileItem] = Field(default_factory=list)
