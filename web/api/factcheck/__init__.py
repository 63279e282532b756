"""Fact-check API."""

from web.api.factcheck.views import analyze_claim, list_fact_checks

__all__ = [
    "list_fact_checks",
    "analyze_claim",
]
