"""Politicians API response schemas."""

from pydantic import BaseModel


class PoliticianItem(BaseModel):
    """A politician in the browse list."""

    id: str
    name: str
    party: str | None
    state: str | None
    office: str | None
    performance_score: float


class PoliticiansResponse(BaseModel):
    """Filtered politicians plus the values each filter can take."""

    items: list[PoliticianItem]
    total: int
    states: list[str]
    parties: list[str]
    offices: list[str]
