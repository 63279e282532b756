"""Analysis API response schemas."""

from pydantic import BaseModel


class ScoreMetricItem(BaseModel):
    """One scored factor with its display band."""

    name: str
    weight: str
    value: float
    band: str


class ScoreBreakdownResponse(BaseModel):
    """Performance score and per-factor breakdown of a politician."""

    politician_id: str
    name: str
    party: str | None
    performance_score: float
    metrics: list[ScoreMetricItem]
    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendation: str | None = None


class MethodologyItem(BaseModel):
    factor: str
    weight: str
    description: str
    calculation: str | None = None


class MethodologyResponse(BaseModel):
    """How performance scores are computed."""

    overview: str
    factors: list[MethodologyItem]
    data_sources: list[str]
    update_frequency: str | None = None
    disclaimer: str | None = None


class ComparedItem(BaseModel):
    rank: int
    name: str
    score: float
    breakdown: dict[str, float]


class ComparisonResponse(BaseModel):
    """Side-by-side comparison of several politicians."""

    ranking: list[ComparedItem]
    highest: ComparedItem
    lowest: ComparedItem
    average_score: float
