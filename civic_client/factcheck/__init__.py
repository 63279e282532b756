"""Fact-check API client."""

from civic_client.factcheck.client import FactCheckClient
from civic_client.factcheck.schemas import FactCheckResult, Verdict

__all__ = [
    "FactCheckClient",
    "FactCheckResult",
    "Verdict",
]
