"""Poll services."""

from app.services.polls.catalog import (
    CATEGORIES,
    POLLS,
    STATUSES,
    featured_poll,
    filter_polls,
    poll_stats,
)
from app.services.polls.service import PollService

__all__ = [
    "CATEGORIES",
    "POLLS",
    "STATUSES",
    "PollService",
    "featured_poll",
    "filter_polls",
    "poll_stats",
]
