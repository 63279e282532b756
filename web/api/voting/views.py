"""Voting API views - thin layer over services."""

import asyncio

from app.container import container
from app.models.voting import VoteDirection, VoteKind, VoteTally
from web.api.errors import ValidationError

from .schemas import VotableItem, VotableItemsResponse, VoteTallyResponse


def _parse(enum_cls, value: str, what: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(e.value for e in enum_cls)
        raise ValidationError(f"Invalid {what}: {value}. Must be one of {allowed}") from None


def cast_vote(
    kind: str,
    item_id: str,
    direction: str,
    up: int = 0,
    down: int = 0,
    own: str | None = None,
) -> VoteTallyResponse:
    """Vote on a project, promise or controversy.

    Raises NotAuthenticatedError when nobody is logged in.
    """
    vote_kind = _parse(VoteKind, kind, "vote kind")
    vote_direction = _parse(VoteDirection, direction, "vote direction")
    tally = VoteTally(up=up, down=down, own=_parse(VoteDirection, own, "vote direction") if own else None)

    result = asyncio.run(container.voting.vote(vote_kind, item_id, vote_direction, tally))

    return VoteTallyResponse(
        kind=vote_kind.value,
        item_id=item_id,
        up=result.up,
        down=result.down,
        own=result.own.value if result.own else None,
    )


def get_votable_items(politician_id: str) -> VotableItemsResponse | None:
    """Projects, promises and controversies of a politician. None means unavailable."""
    profile = asyncio.run(container.analysis.profile(politician_id))
    if profile is None:
        return None

    groups = [
        (VoteKind.PROJECT, profile.projects),
        (VoteKind.PROMISE, profile.promises),
        (VoteKind.CONTROVERSY, profile.controversies),
    ]
    items = [
        VotableItem(
            kind=kind.value,
            id=i.id,
            title=i.title,
            description=i.description,
            status=i.status,
            up=i.upvotes,
            down=i.downvotes,
        )
        for kind, group in groups
        for i in group
    ]

    return VotableItemsResponse(politician_id=politician_id, items=items)
