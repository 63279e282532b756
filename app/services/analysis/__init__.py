"""Analysis services."""

from app.services.analysis.service import (
    METRICS,
    AnalysisService,
    build_breakdown,
    score_band,
    summarize_comparison,
)

__all__ = [
    "METRICS",
    "AnalysisService",
    "build_breakdown",
    "score_band",
    "summarize_comparison",
]
