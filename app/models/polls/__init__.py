"""Poll domain models."""

from app.models.polls.entities import Poll, PollOption, PollStats, PollStatus

__all__ = [
    "Poll",
    "PollOption",
    "PollStats",
    "PollStatus",
]
