"""Fact-check API schemas."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class Verdict(StrEnum):
    """Fact-check verdicts, most to least accurate."""

    TRUE = "true"
    MOSTLY_TRUE = "mostly-true"
    HALF_TRUE = "half-true"
    MOSTLY_FALSE = "mostly-false"
    FALSE = "false"
    UNVERIFIABLE = "unverifiable"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()


class FactCheckResult(BaseModel):
    """AI analysis of a single claim."""

    verdict: Verdict
    confidence: float
    summary: str
    key_points: list[str] = Field(alias="keyPoints", default_factory=list)
    sources: list[str] = Field(default_factory=list)
    disclaimer: str = ""
    claim: str | None = None
    analyzed_at: datetime | None = Field(alias="analyzedAt", default=None)

    @field_validator("confidence")
    @classmethod
    def _clamp_confidence(cls, v: float) -> float:
        return min(100.0, max(0.0, v))

    class Config:
        populate_by_name = True
