"""Poll service - browsing public opinion polls."""

from app.models.polls import Poll, PollStats
from app.services.polls.catalog import POLLS, featured_poll, filter_polls, poll_stats


class PollService:
    """Poll business logic."""

    def __init__(self, items: list[Poll] | None = None):
        self._items = POLLS if items is None else items

    def search(self, query: str = "", category: str | None = None, status: str | None = None) -> list[Poll]:
        return filter_polls(self._items, query, category, status)

    def featured(self) -> Poll | None:
        return featured_poll(self._items)

    def stats(self) -> PollStats:
        """Stats over every poll, independent of filters."""
        return poll_stats(self._items)
