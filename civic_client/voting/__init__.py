"""Voting API client."""

from civic_client.voting.client import VotingClient
from civic_client.voting.schemas import VoteRequest, VoteResponse, VoteTransition

__all__ = [
    "VotingClient",
    "VoteRequest",
    "VoteResponse",
    "VoteTransition",
]
