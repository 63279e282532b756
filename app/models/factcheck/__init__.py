"""Fact-check domain models."""

from app.models.factcheck.entities import FactCheck, FactCheckStats, Verdict

__all__ = [
    "FactCheck",
    "FactCheckStats",
    "Verdict",
]
