"""Voting API response schemas."""

from pydantic import BaseModel


class VoteTallyResponse(BaseModel):
    """Counters of one votable item after a vote."""

    kind: str
    item_id: str
    up: int
    down: int
    own: str | None = None


class VotableItem(BaseModel):
    """A project, promise or controversy that can be voted on."""

    kind: str
    id: str
    title: str
    description: str | None = None
    status: str | None = None
    up: int = 0
    down: int = 0


class VotableItemsResponse(BaseModel):
    politician_id: str
    items: list[VotableItem]
