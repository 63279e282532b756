"""Politicians API."""

from web.api.politicians.views import list_politicians, select_politician

__all__ = [
    "list_politicians",
    "select_politician",
]
