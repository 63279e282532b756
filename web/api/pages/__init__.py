"""Static pages API."""

from web.api.pages.views import get_about, get_privacy

__all__ = [
    "get_about",
    "get_privacy",
]
