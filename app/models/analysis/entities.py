"""Analysis domain entities - displayed score breakdowns."""

from dataclasses import dataclass, field

from app.models.common import BaseEntity


@dataclass
class ScoreMetric(BaseEntity):
    """One scored factor as shown on a profile."""

    name: str
    weight: str
    value: float
    band: str


@dataclass
class ComparedPolitician(BaseEntity):
    rank: int
    name: str
    score: float
    breakdown: dict[str, float] = field(default_factory=dict)


@dataclass
class ComparisonSummary(BaseEntity):
    """Side-by-side ranking of compared politicians."""

    ranking: list[ComparedPolitician]
    highest: ComparedPolitician
    lowest: ComparedPolitician
    average_score: float
