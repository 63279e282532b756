"""Tests for vote tally reconciliation."""

import itertools

import pytest

from app.models.voting import VoteDirection, VoteTally, VoteTransition
from app.services.voting import reconcile
from app.services.voting.tally import TRANSITIONS

UP, DOWN = VoteDirection.UP, VoteDirection.DOWN


class TestTransitions:
    @pytest.mark.parametrize(
        "transition,requested,expected",
        [
            ("added", "up", (6, 3, UP)),
            ("added", "down", (5, 4, DOWN)),
            ("removed", "up", (4, 3, None)),
            ("removed", "down", (5, 2, None)),
            ("changed", "up", (6, 2, UP)),
            ("changed", "down", (4, 4, DOWN)),
        ],
    )
    def test_table(self, transition, requested, expected):
        result = reconcile(VoteTally(up=5, down=3), transition, requested)
        assert (result.up, result.down, result.own) == expected

    def test_covers_every_pair(self):
        assert set(TRANSITIONS) == set(itertools.product(VoteTransition, VoteDirection))

    def test_changed_up_to_down(self):
        result = reconcile(VoteTally(up=5, down=3, own=UP), VoteTransition.CHANGED, DOWN)
        assert result == VoteTally(up=4, down=4, own=DOWN)

    def test_added_from_empty(self):
        result = reconcile(VoteTally(), VoteTransition.ADDED, UP)
        assert result == VoteTally(up=1, down=0, own=UP)

    def test_does_not_mutate_input(self):
        tally = VoteTally(up=1, down=1)
        reconcile(tally, VoteTransition.ADDED, DOWN)
        assert tally == VoteTally(up=1, down=1)

    def test_unknown_transition_raises(self):
        with pytest.raises(ValueError):
            reconcile(VoteTally(), "flipped", UP)


def _server(own, requested):
    """Transition a well-behaved server reports for a toggle click."""
    if own is None:
        return VoteTransition.ADDED
    if own == requested:
        return VoteTransition.REMOVED
    return VoteTransition.CHANGED


class TestSequences:
    @pytest.mark.parametrize("clicks", list(itertools.product([UP, DOWN], repeat=5)))
    def test_never_negative(self, clicks):
        tally = VoteTally()
        for requested in clicks:
            tally = reconcile(tally, _server(tally.own, requested), requested)
            assert tally.up >= 0
            assert tally.down >= 0
            assert tally.up + tally.down == (0 if tally.own is None else 1)

    def test_toggle_twice_restores(self):
        start = VoteTally(up=10, down=2)
        once = reconcile(start, VoteTransition.ADDED, DOWN)
        assert reconcile(once, VoteTransition.REMOVED, DOWN) == start
