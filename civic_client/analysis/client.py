"""Analysis API client."""

from civic_client.analysis.schemas import Methodology, PoliticianAnalysis
from civic_client.base import BaseClient


class AnalysisClient(BaseClient):
    """Client for politician analysis endpoints."""

    async def politician_analysis(self, politician_id: str) -> PoliticianAnalysis:
        """GET /analysis/politician/{id} - score breakdown and AI analysis."""
        data = await self._get(f"analysis/politician/{politician_id}")
        return PoliticianAnalysis.model_validate(data)

    async def methodology(self) -> Methodology:
        """GET /analysis/methodology - how scores are computed."""
        data = await self._get("analysis/methodology")
        return Methodology.model_validate(data)

    async def compare(self, politician_ids: list[str]) -> list[PoliticianAnalysis]:
        """POST /analysis/compare - analyses for two or more politicians."""
        if len(politician_ids) < 2:
            raise ValueError("Please provide at least 2 politician IDs to compare")
        data = await self._post("analysis/compare", {"ids": politician_ids})
        return [PoliticianAnalysis.model_validate(p) for p in data.get("politicians", [])]
