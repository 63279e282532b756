"""Vote service - authenticated voting on profile items."""

from loguru import logger

from app.models.voting import VoteDirection, VoteKind, VoteTally
from app.services.session.store import SessionStore
from app.services.voting.tally import reconcile
from civic_client import ApiError, VotingClient

LOGIN_REQUIRED = "Please login to vote"


class NotAuthenticatedError(Exception):
    """Voting requires a logged-in session."""

    def __init__(self, message: str = LOGIN_REQUIRED):
        self.message = message
        super().__init__(self.message)


class VoteService:
    """Sends votes and keeps the caller's local tally in step."""

    def __init__(self, session: SessionStore, client_factory=VotingClient):
        self._session = session
        self._client_factory = client_factory

    async def vote(
        self,
        kind: VoteKind,
        item_id: str,
        direction: VoteDirection,
        tally: VoteTally,
    ) -> VoteTally:
        """Vote on an item and return the updated tally."""
        if not self._session.is_authenticated:
            raise NotAuthenticatedError()

        try:
            async with self._client_factory(token=self._session.token) as client:
                action = await client.vote(str(kind), item_id, str(direction))
        except ApiError as e:
            if e.unauthorized:
                raise NotAuthenticatedError() from e
            raise

        logger.debug("Vote {} on {} {}: {}", direction, kind, item_id, action)
        return reconcile(tally, action, direction)
