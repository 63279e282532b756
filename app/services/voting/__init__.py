"""Voting services."""

from app.services.voting.service import NotAuthenticatedError, VoteService
from app.services.voting.tally import reconcile

__all__ = [
    "NotAuthenticatedError",
    "VoteService",
    "reconcile",
]
