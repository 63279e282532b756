"""Tests for the platform API client."""

import asyncio
import json

import httpx
import pytest

from civic_client import ApiError, FactCheckClient, VotingClient, safe_request
from civic_client.analysis import AnalysisClient
from civic_client.factcheck import Verdict
from civic_client.voting import VoteRequest, VoteTransition


def transport(handler):
    return httpx.MockTransport(handler)


def ok(data, status=200):
    return httpx.Response(status, json={"success": True, "data": data})


RESULT = {
    "verdict": "mostly-false",
    "confidence": 82,
    "summary": "Growth was far lower.",
    "keyPoints": ["NBS reported 2.54%"],
    "sources": ["NBS"],
    "disclaimer": "AI generated.",
    "analyzedAt": "2024-01-20T10:00:00Z",
}


async def analyze(claim, handler):
    async with FactCheckClient(transport=transport(handler)) as client:
        return await client.analyze(claim)


class TestEnvelope:
    def test_unwraps_data(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return ok(RESULT)

        result = asyncio.run(analyze("GDP grew by 15%", handler))
        assert seen["path"].endswith("/factcheck/analyze")
        assert seen["body"] == {"claim": "GDP grew by 15%"}
        assert result.verdict == Verdict.MOSTLY_FALSE
        assert result.key_points == ["NBS reported 2.54%"]

    def test_error_status(self):
        def handler(request):
            return httpx.Response(503, json={"success": False, "error": "AI service down"})

        with pytest.raises(ApiError) as exc:
            asyncio.run(analyze("GDP grew by 15%", handler))
        assert exc.value.status_code == 503
        assert exc.value.message == "AI service down"

    def test_success_false(self):
        def handler(request):
            return httpx.Response(200, json={"success": False, "error": "Nope"})

        with pytest.raises(ApiError):
            asyncio.run(analyze("GDP grew by 15%", handler))

    def test_confidence_clamped(self):
        result = asyncio.run(analyze("GDP grew by 15%", lambda r: ok({**RESULT, "confidence": 140})))
        assert result.confidence == 100


class TestVotingClient:
    def test_sends_token_and_body(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return ok({"action": "added"})

        async def vote():
            async with VotingClient(token="tok", transport=transport(handler)) as client:
                return await client.vote("project", "p1", "up")

        assert asyncio.run(vote()) is VoteTransition.ADDED
        assert seen["auth"] == "Bearer tok"
        assert seen["path"].endswith("/politicians/vote/project/p1")
        assert seen["body"] == {"voteType": "up"}

    def test_unauthorized(self):
        async def vote():
            handler = lambda r: httpx.Response(401, json={"error": "Unauthorized"})  # noqa: E731
            async with VotingClient(transport=transport(handler)) as client:
                return await client.vote("promise", "p1", "down")

        with pytest.raises(ApiError) as exc:
            asyncio.run(vote())
        assert exc.value.unauthorized

    def test_request_accepts_field_or_wire_name(self):
        assert VoteRequest(vote_type="up") == VoteRequest(voteType="up")
        assert VoteRequest(vote_type="down").model_dump(by_alias=True) == {"voteType": "down"}


class TestAnalysisClient:
    def test_compare_needs_two(self):
        async def compare():
            async with AnalysisClient(transport=transport(lambda r: ok({}))) as client:
                return await client.compare(["only-one"])

        with pytest.raises(ValueError):
            asyncio.run(compare())


class TestSafeRequest:
    def test_returns_default_on_api_error(self):
        async def failing():
            raise ApiError(500, "boom")

        assert asyncio.run(safe_request(failing(), [])) == []

    def test_returns_default_on_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused")

        async def call():
            async with FactCheckClient(transport=transport(handler)) as client:
                return await safe_request(client.analyze("GDP grew by 15%"))

        assert asyncio.run(call()) is None

    def test_returns_default_on_malformed_payload(self):
        async def call():
            async with FactCheckClient(transport=transport(lambda r: ok({"verdict": "maybe"}))) as client:
                return await safe_request(client.analyze("GDP grew by 15%"))

        assert asyncio.run(call()) is None

    def test_passes_result_through(self):
        async def value():
            return 42

        assert asyncio.run(safe_request(value())) == 42
