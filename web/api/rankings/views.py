"""Rankings API views - thin layer over services."""

from app.container import container
from web.api.errors import NotFoundError

from .schemas import OfficeItem, OfficeRankingResponse, OfficesResponse, RankingItem


def get_offices() -> OfficesResponse:
    """Get all offices."""
    data = container.rankings.get_offices()
    return OfficesResponse(items=[OfficeItem(**o) for o in data])


def get_office_ranking(office_id: str, limit: int = 50) -> OfficeRankingResponse:
    """Get the ranking of politicians holding an office."""
    if office_id not in {o["id"] for o in container.rankings.get_offices()}:
        raise NotFoundError(f"Office not found: {office_id}")

    data = container.rankings.get_office_ranking(office_id, limit)

    items = [
        RankingItem(
            rank=r.rank,
            politician_id=r.politician_id,
            name=r.name,
            party=r.party,
            region=r.region,
            total_score=r.total_score,
        )
        for r in data
    ]

    return OfficeRankingResponse(office_id=office_id, items=items)
