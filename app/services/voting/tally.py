"""Vote tally reconciliation - pure, no I/O."""

from dataclasses import replace

from app.models.voting import VoteDirection, VoteTally, VoteTransition

UP, DOWN = VoteDirection.UP, VoteDirection.DOWN

# (transition, requested) -> (up delta, down delta, own vote after)
TRANSITIONS: dict[tuple[VoteTransition, VoteDirection], tuple[int, int, VoteDirection | None]] = {
    (VoteTransition.ADDED, UP): (1, 0, UP),
    (VoteTransition.ADDED, DOWN): (0, 1, DOWN),
    (VoteTransition.REMOVED, UP): (-1, 0, None),
    (VoteTransition.REMOVED, DOWN): (0, -1, None),
    (VoteTransition.CHANGED, UP): (1, -1, UP),
    (VoteTransition.CHANGED, DOWN): (-1, 1, DOWN),
}


def reconcile(tally: VoteTally, transition: VoteTransition, requested: VoteDirection) -> VoteTally:
    """Apply a server-acknowledged vote transition to a local tally.

    The transition is trusted as reported; an unknown kind raises rather
    than being ignored.
    """
    du, dd, own = TRANSITIONS[(VoteTransition(transition), VoteDirection(requested))]
    return replace(tally, up=tally.up + du, down=tally.down + dd, own=own)
