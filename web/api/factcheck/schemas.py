"""Fact-check API response schemas."""

import datetime

from pydantic import BaseModel


class FactCheckItem(BaseModel):
    """A published fact check."""

    id: str
    claim: str
    claimant: str
    claimant_role: str
    date: datetime.date
    verdict: str
    verdict_label: str
    category: str
    summary: str
    sources: int
    views: int
    shares: int


class FactCheckStatsResponse(BaseModel):
    total: int
    true: int
    false: int
    mixed: int


class FactCheckListResponse(BaseModel):
    """Filtered fact checks plus stats over the full catalog."""

    items: list[FactCheckItem]
    stats: FactCheckStatsResponse
    categories: list[str]


class ClaimAnalysisResponse(BaseModel):
    """AI verdict on a submitted claim."""

    claim: str
    verdict: str
    verdict_label: str
    confidence: float
    summary: str
    key_points: list[str]
    sources: list[str]
    disclaimer: str
    export_text: str
