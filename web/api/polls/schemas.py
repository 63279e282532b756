"""Poll API response schemas."""

import datetime

from pydantic import BaseModel


class PollOptionItem(BaseModel):
    id: str
    text: str
    votes: int
    percentage: float


class PollItem(BaseModel):
    """A poll with its current results."""

    id: str
    title: str
    description: str
    category: str
    status: str
    total_votes: int
    start_date: datetime.date
    end_date: datetime.date
    has_voted: bool
    options: list[PollOptionItem]
    leader: str | None


class PollStatsResponse(BaseModel):
    active: int
    total_votes: int
    voted: int


class PollListResponse(BaseModel):
    """Filtered polls plus the featured poll and stats over every poll."""

    items: list[PollItem]
    featured: PollItem | None
    stats: PollStatsResponse
    categories: list[str]
    statuses: list[str]
