"""Voting API."""

from web.api.voting.views import cast_vote, get_votable_items

__all__ = [
    "cast_vote",
    "get_votable_items",
]
