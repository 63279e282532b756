"""Rankings API response schemas."""

from pydantic import BaseModel


class OfficeItem(BaseModel):
    """A government office."""

    id: str
    name: str
    category: str
    level: str
    description: str | None = None


class OfficesResponse(BaseModel):
    items: list[OfficeItem]


class RankingItem(BaseModel):
    """A politician's position in an office ranking."""

    rank: int
    politician_id: str
    name: str
    party: str | None
    region: str | None
    total_score: float


class OfficeRankingResponse(BaseModel):
    """Ranking within one office."""

    office_id: str
    items: list[RankingItem]
