"""Voting API schemas."""

from enum import StrEnum

from pydantic import BaseModel, Field


class VoteTransition(StrEnum):
    """How a vote request changed the stored vote, as reported by the server."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class VoteRequest(BaseModel):
    """Body of a vote request."""

    vote_type: str = Field(alias="voteType")

    class Config:
        populate_by_name = True


class VoteResponse(BaseModel):
    """Server classification of how a vote changed the stored state."""

    action: VoteTransition
