"""Rankings API."""

from web.api.rankings.views import get_office_ranking, get_offices

__all__ = [
    "get_offices",
    "get_office_ranking",
]
