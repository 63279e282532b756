"""Analysis API views - thin layer over services."""

import asyncio

from app.container import container
from app.services.analysis import build_breakdown
from web.api.errors import validate_politician_ids

from .schemas import (
    ComparedItem,
    ComparisonResponse,
    MethodologyItem,
    MethodologyResponse,
    ScoreBreakdownResponse,
    ScoreMetricItem,
)


def get_score_breakdown(politician_id: str) -> ScoreBreakdownResponse | None:
    """Get the score breakdown of a politician. None means analysis is unavailable."""
    data = asyncio.run(container.analysis.politician_analysis(politician_id))
    if data is None:
        return None

    metrics = [ScoreMetricItem(**m.to_dict()) for m in build_breakdown(data.score_breakdown)]
    ai = data.ai_analysis

    return ScoreBreakdownResponse(
        politician_id=data.politician.id,
        name=data.politician.full_name,
        party=data.politician.party,
        performance_score=data.politician.performance_score,
        metrics=metrics,
        strengths=ai.strengths if ai else [],
        weaknesses=ai.weaknesses if ai else [],
        recommendation=ai.recommendation if ai else None,
    )


def get_methodology() -> MethodologyResponse | None:
    """Get the scoring methodology."""
    data = asyncio.run(container.analysis.methodology())
    if data is None:
        return None

    factors = [
        MethodologyItem(
            factor=name,
            weight=w.weight,
            description=w.description,
            calculation=w.calculation,
        )
        for name, w in data.weights.items()
    ]

    return MethodologyResponse(
        overview=data.overview,
        factors=factors,
        data_sources=data.data_sources,
        update_frequency=data.update_frequency,
        disclaimer=data.disclaimer,
    )


def compare_politicians(politician_ids: list[str]) -> ComparisonResponse | None:
    """Compare two or more politicians."""
    ids = validate_politician_ids(politician_ids)
    _, summary = asyncio.run(container.analysis.compare(ids))
    if summary is None:
        return None

    ranking = [ComparedItem(**r.to_dict()) for r in summary.ranking]

    return ComparisonResponse(
        ranking=ranking,
        highest=ranking[0],
        lowest=ranking[-1],
        average_score=round(summary.average_score, 1),
    )
