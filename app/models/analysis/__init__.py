"""Analysis domain models."""

from app.models.analysis.entities import ComparedPolitician, ComparisonSummary, ScoreMetric

__all__ = [
    "ComparedPolitician",
    "ComparisonSummary",
    "ScoreMetric",
]
