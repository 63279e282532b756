"""Voting domain entities - client-held vote tallies."""

from dataclasses import dataclass
from enum import StrEnum

from app.models.common import BaseEntity
from civic_client.voting.schemas import VoteTransition  # noqa: F401


class VoteKind(StrEnum):
    """Kinds of profile items that accept votes."""

    PROJECT = "project"
    PROMISE = "promise"
    CONTROVERSY = "controversy"


class VoteDirection(StrEnum):
    """Direction of a single vote."""

    UP = "up"
    DOWN = "down"


@dataclass
class VoteTally(BaseEntity):
    """Up/down counters for one item plus the caller's own vote."""

    up: int = 0
    down: int = 0
    own: VoteDirection | None = None
