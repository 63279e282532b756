"""Poll domain entities."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum

from app.models.common import BaseEntity


class PollStatus(StrEnum):
    ACTIVE = "active"
    ENDED = "ended"
    UPCOMING = "upcoming"


@dataclass
class PollOption(BaseEntity):
    """One answer of a poll with its share of the vote."""

    id: str
    text: str
    votes: int = 0
    percentage: float = 0.0


@dataclass
class Poll(BaseEntity):
    """A public opinion poll."""

    id: str
    title: str
    description: str
    category: str
    status: PollStatus
    total_votes: int
    start_date: date
    end_date: date
    options: list[PollOption] = field(default_factory=list)
    has_voted: bool = False

    @property
    def leader(self) -> PollOption | None:
        """Option with the most votes; None before any vote is cast."""
        if not self.options or not self.total_votes:
            return None
        return max(self.options, key=lambda o: o.votes)


@dataclass
class PollStats(BaseEntity):
    """Headline numbers over a set of polls."""

    active: int
    total_votes: int
    voted: int
