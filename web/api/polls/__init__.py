"""Poll API."""

from web.api.polls.views import list_polls

__all__ = [
    "list_polls",
]
