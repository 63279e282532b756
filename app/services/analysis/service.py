"""Analysis service - score breakdowns and politician comparison."""

from loguru import logger

from app.models.analysis import ComparedPolitician, ComparisonSummary, ScoreMetric
from civic_client import AnalysisClient, PoliticianClient, safe_request
from civic_client.analysis import Methodology, PoliticianAnalysis
from civic_client.politicians import PoliticianProfile

CONTROVERSY_IMPACT = "Controversy Impact"

# Display order and weight of each scored factor
METRICS = [
    ("Promise Fulfillment", "30%"),
    ("Legislative Activity", "20%"),
    ("Project Completion", "15%"),
    ("Public Sentiment", "15%"),
    ("Media Presence", "10%"),
    (CONTROVERSY_IMPACT, "-10%"),
]


def score_band(name: str, value: float) -> str:
    """Colour band for a metric value. Controversy is always shown as poor."""
    if name == CONTROVERSY_IMPACT:
        return "poor"
    if value >= 70:
        return "good"
    if value >= 50:
        return "fair"
    return "poor"


def build_breakdown(score_breakdown: dict[str, float]) -> list[ScoreMetric]:
    """All six metrics in display order; missing values show as 0."""
    metrics = []
    for name, weight in METRICS:
        value = score_breakdown.get(name) or 0
        metrics.append(ScoreMetric(name=name, weight=weight, value=value, band=score_band(name, value)))
    return metrics


def summarize_comparison(analyses: list[PoliticianAnalysis]) -> ComparisonSummary | None:
    """Rank compared politicians by performance score."""
    if not analyses:
        return None

    ranked = sorted(analyses, key=lambda a: a.politician.performance_score, reverse=True)
    ranking = [
        ComparedPolitician(
            rank=i + 1,
            name=a.politician.full_name,
            score=a.politician.performance_score,
            breakdown=a.score_breakdown,
        )
        for i, a in enumerate(ranked)
    ]
    return ComparisonSummary(
        ranking=ranking,
        highest=ranking[0],
        lowest=ranking[-1],
        average_score=sum(r.score for r in ranking) / len(ranking),
    )


class AnalysisService:
    """Fetches analyses from the platform API; failures yield None."""

    def __init__(self, client_factory=AnalysisClient, profile_client_factory=PoliticianClient):
        self._client_factory = client_factory
        self._profile_client_factory = profile_client_factory

    async def politician_analysis(self, politician_id: str) -> PoliticianAnalysis | None:
        async with self._client_factory() as client:
            return await safe_request(client.politician_analysis(politician_id))

    async def profile(self, politician_id: str) -> PoliticianProfile | None:
        """Votable promises, projects and controversies of a politician."""
        async with self._profile_client_factory() as client:
            return await safe_request(client.profile(politician_id))

    async def methodology(self) -> Methodology | None:
        async with self._client_factory() as client:
            return await safe_request(client.methodology())

    async def compare(self, politician_ids: list[str]) -> tuple[list[PoliticianAnalysis], ComparisonSummary | None]:
        """Analyses for several politicians plus a ranking summary."""
        async with self._client_factory() as client:
            analyses = await safe_request(client.compare(politician_ids), [])
        logger.debug("Compared {} of {} politicians", len(analyses), len(politician_ids))
        return analyses, summarize_comparison(analyses)
