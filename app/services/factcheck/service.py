"""Fact-check service - published checks and AI claim analysis."""

from loguru import logger

from app.models.factcheck import FactCheck, FactCheckStats
from app.services.factcheck.catalog import FACT_CHECKS, fact_check_stats, filter_fact_checks
from civic_client import FactCheckClient, safe_request
from civic_client.factcheck import FactCheckResult


def format_fact_check_result(claim: str, result: FactCheckResult) -> str:
    """Plain-text rendering for copying a result."""
    key_points = "\n".join(f"- {p}" for p in result.key_points)
    return (
        f"Claim: {claim}\n\n"
        f"Verdict: {result.verdict.value.upper()}\n"
        f"Confidence: {result.confidence:g}%\n\n"
        f"Summary: {result.summary}\n\n"
        f"Key Points:\n{key_points}\n\n"
        f"Sources: {', '.join(result.sources)}"
    )


class FactCheckService:
    """Fact-check business logic."""

    def __init__(self, items: list[FactCheck] | None = None, client_factory=FactCheckClient):
        self._items = FACT_CHECKS if items is None else items
        self._client_factory = client_factory

    def search(self, query: str = "", verdict: str | None = None, category: str | None = None) -> list[FactCheck]:
        return filter_fact_checks(self._items, query, verdict, category)

    def stats(self) -> FactCheckStats:
        """Stats over every published check, independent of filters."""
        return fact_check_stats(self._items)

    async def analyze(self, claim: str) -> FactCheckResult | None:
        """AI analysis of a claim, or None when the service is unavailable."""
        logger.info("Analyzing claim: {}...", claim[:50])
        async with self._client_factory() as client:
            return await safe_request(client.analyze(claim))
