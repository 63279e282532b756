"""Tests for the vote service."""

import asyncio
import functools
import json

import httpx
import pytest

from app.models.voting import VoteDirection, VoteKind, VoteTally
from app.services.session import SessionStore, SessionUser
from app.services.voting import NotAuthenticatedError, VoteService
from civic_client import ApiError, VotingClient

USER = SessionUser(id="u1", email="ada@example.com", role="USER")


@pytest.fixture
def session(tmp_path):
    return SessionStore(tmp_path / "session.json")


@pytest.fixture
def logged_in(session):
    session.set_credentials(USER, "tok-123")
    return session


def voting_factory(handler):
    return functools.partial(VotingClient, transport=httpx.MockTransport(handler))


def vote(service, tally, direction=VoteDirection.UP):
    return asyncio.run(service.vote(VoteKind.PROJECT, "p1", direction, tally))


class TestUnauthenticated:
    def test_raises_without_calling_api(self, session):
        calls = []

        def factory(**kwargs):
            calls.append(kwargs)
            raise AssertionError("client must not be created")

        with pytest.raises(NotAuthenticatedError) as exc:
            vote(VoteService(session, client_factory=factory), VoteTally(up=3))
        assert exc.value.message == "Please login to vote"
        assert calls == []

    def test_server_401_maps_to_login_required(self, logged_in):
        service = VoteService(logged_in, client_factory=voting_factory(lambda r: httpx.Response(401)))
        with pytest.raises(NotAuthenticatedError):
            vote(service, VoteTally())


class TestVote:
    def test_added(self, logged_in):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "data": {"action": "added"}})

        result = vote(VoteService(logged_in, client_factory=voting_factory(handler)), VoteTally(up=3, down=1))

        assert result == VoteTally(up=4, down=1, own=VoteDirection.UP)
        assert seen == {"auth": "Bearer tok-123", "body": {"voteType": "up"}}

    def test_changed(self, logged_in):
        handler = lambda r: httpx.Response(200, json={"success": True, "data": {"action": "changed"}})  # noqa: E731
        service = VoteService(logged_in, client_factory=voting_factory(handler))

        result = vote(service, VoteTally(up=5, down=3, own=VoteDirection.UP), VoteDirection.DOWN)
        assert result == VoteTally(up=4, down=4, own=VoteDirection.DOWN)

    def test_removed(self, logged_in):
        handler = lambda r: httpx.Response(200, json={"success": True, "data": {"action": "removed"}})  # noqa: E731
        service = VoteService(logged_in, client_factory=voting_factory(handler))

        result = vote(service, VoteTally(up=5, down=3, own=VoteDirection.UP))
        assert result == VoteTally(up=4, down=3, own=None)

    def test_other_errors_propagate(self, logged_in):
        service = VoteService(logged_in, client_factory=voting_factory(lambda r: httpx.Response(500)))
        with pytest.raises(ApiError) as exc:
            vote(service, VoteTally())
        assert exc.value.status_code == 500

    def test_unknown_action_raises(self, logged_in):
        handler = lambda r: httpx.Response(200, json={"success": True, "data": {"action": "flipped"}})  # noqa: E731
        service = VoteService(logged_in, client_factory=voting_factory(handler))
        with pytest.raises(ValueError):
            vote(service, VoteTally())
