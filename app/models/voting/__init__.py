"""Voting domain models."""

from app.models.voting.entities import VoteDirection, VoteKind, VoteTally, VoteTransition

__all__ = [
    "VoteKind",
    "VoteDirection",
    "VoteTransition",
    "VoteTally",
]
