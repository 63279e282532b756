"""Voting API client."""

from civic_client.base import BaseClient
from civic_client.voting.schemas import VoteRequest, VoteResponse, VoteTransition


class VotingClient(BaseClient):
    """Client for item voting endpoints."""

    async def vote(self, kind: str, item_id: str, direction: str) -> VoteTransition:
        """POST /politicians/vote/{kind}/{item_id} - returns the transition kind."""
        data = await self._post(
            f"politicians/vote/{kind}/{item_id}",
            VoteRequest(vote_type=direction).model_dump(by_alias=True),
        )
        return VoteResponse.model_validate(data).action
