"""Analysis API schemas - score breakdowns and methodology."""

from pydantic import BaseModel, Field


class PoliticianSummary(BaseModel):
    """Politician fields returned alongside an analysis."""

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    party: str | None = Field(alias="partyAffiliation", default=None)
    performance_score: float = Field(alias="performanceScore", default=50.0)

    class Config:
        populate_by_name = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class NewsAnalysis(BaseModel):
    """Media coverage summary."""

    total_mentions: int = Field(alias="totalMentions", default=0)
    sentiment_score: float = Field(alias="sentimentScore", default=0.0)
    top_topics: list[str] = Field(alias="topTopics", default_factory=list)
    recent_headlines: list[str] = Field(alias="recentHeadlines", default_factory=list)

    class Config:
        populate_by_name = True


class AIAnalysis(BaseModel):
    """Narrative assessment produced by the analysis service."""

    strengths: list[str] = []
    weaknesses: list[str] = []
    key_achievements: list[str] = Field(alias="keyAchievements", default_factory=list)
    areas_of_concern: list[str] = Field(alias="areasOfConcern", default_factory=list)
    public_perception: str | None = Field(alias="publicPerception", default=None)
    recommendation: str | None = None

    class Config:
        populate_by_name = True


class PoliticianAnalysis(BaseModel):
    """GET /analysis/politician/{id} payload."""

    politician: PoliticianSummary
    score_breakdown: dict[str, float] = Field(alias="scoreBreakdown", default_factory=dict)
    news_analysis: NewsAnalysis | None = Field(alias="newsAnalysis", default=None)
    ai_analysis: AIAnalysis | None = Field(alias="aiAnalysis", default=None)

    class Config:
        populate_by_name = True


class MethodologyWeight(BaseModel):
    """One scoring factor."""

    weight: str
    description: str
    calculation: str | None = None


class Methodology(BaseModel):
    """GET /analysis/methodology payload."""

    overview: str
    weights: dict[str, MethodologyWeight] = {}
    data_sources: list[str] = Field(alias="dataSources", default_factory=list)
    update_frequency: str | None = Field(alias="updateFrequency", default=None)
    disclaimer: str | None = None

    class Config:
        populate_by_name = True
