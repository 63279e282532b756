"""Fact-check API client."""

from civic_client.base import BaseClient
from civic_client.factcheck.schemas import FactCheckResult


class FactCheckClient(BaseClient):
    """Client for fact-check endpoints."""

    async def analyze(self, claim: str) -> FactCheckResult:
        """POST /factcheck/analyze - AI analysis of a claim."""
        data = await self._post("factcheck/analyze", {"claim": claim})
        return FactCheckResult.model_validate(data)
