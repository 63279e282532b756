"""Fact-check API views - thin layer over services."""

import asyncio

from app.container import container
from app.services.factcheck import CATEGORIES, format_fact_check_result
from web.api.errors import validate_claim

from .schemas import ClaimAnalysisResponse, FactCheckItem, FactCheckListResponse, FactCheckStatsResponse


def list_fact_checks(
    query: str = "",
    verdict: str | None = None,
    category: str | None = None,
) -> FactCheckListResponse:
    """Search published fact checks."""
    data = container.factcheck.search(query, verdict, category)
    stats = container.factcheck.stats()

    items = [
        FactCheckItem(
            id=f.id,
            claim=f.claim,
            claimant=f.claimant,
            claimant_role=f.claimant_role,
            date=f.date,
            verdict=f.verdict.value,
            verdict_label=f.verdict.label,
            category=f.category,
            summary=f.summary,
            sources=f.sources,
            views=f.views,
            shares=f.shares,
        )
        for f in data
    ]

    return FactCheckListResponse(
        items=items,
        stats=FactCheckStatsResponse(**stats.to_dict()),
        categories=CATEGORIES,
    )


def analyze_claim(claim: str) -> ClaimAnalysisResponse | None:
    """Run AI fact checking on a claim. None means the service is unavailable."""
    claim = validate_claim(claim)
    result = asyncio.run(container.factcheck.analyze(claim))
    if result is None:
        return None

    return ClaimAnalysisResponse(
        claim=claim,
        verdict=result.verdict.value,
        verdict_label=result.verdict.label,
        confidence=result.confidence,
        summary=result.summary,
        key_points=result.key_points,
        sources=result.sources,
        disclaimer=result.disclaimer,
        export_text=format_fact_check_result(claim, result),
    )
