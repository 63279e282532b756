"""Politicians API client."""

from civic_client.base import BaseClient
from civic_client.politicians.schemas import PoliticianProfile


class PoliticianClient(BaseClient):
    """Client for politician profile endpoints."""

    async def profile(self, politician_id: str) -> PoliticianProfile:
        """GET /politicians/{id}/profile"""
        data = await self._get(f"politicians/{politician_id}/profile")
        return PoliticianProfile.model_validate(data)
