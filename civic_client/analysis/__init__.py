"""Analysis API client."""

from civic_client.analysis.client import AnalysisClient
from civic_client.analysis.schemas import (
    AIAnalysis,
    Methodology,
    MethodologyWeight,
    NewsAnalysis,
    PoliticianAnalysis,
    PoliticianSummary,
)

__all__ = [
    "AnalysisClient",
    "AIAnalysis",
    "Methodology",
    "MethodologyWeight",
    "NewsAnalysis",
    "PoliticianAnalysis",
    "PoliticianSummary",
]
