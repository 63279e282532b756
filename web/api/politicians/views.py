"""Politicians API views - thin layer over services."""

from app.container import container
from web.api.errors import NotFoundError

from .schemas import PoliticianItem, PoliticiansResponse


def _options(politicians: list[dict], key: str) -> list[str]:
    return sorted({p[key] for p in politicians if p.get(key)})


def list_politicians(
    state: str | None = None,
    party: str | None = None,
    office: str | None = None,
) -> PoliticiansResponse:
    """Browse politicians with exact-match filters."""
    browse = container.browse
    if not browse.politicians:
        browse.set_politicians(container.rankings.get_politicians())
    browse.set_filters({"state": state, "party": party, "office": office})

    items = [
        PoliticianItem(
            id=p["id"],
            name=f"{p['first_name']} {p['last_name']}",
            party=p["party"],
            state=p["state"],
            office=p["office"],
            performance_score=p["performance_score"],
        )
        for p in browse.filtered()
    ]

    return PoliticiansResponse(
        items=items,
        total=len(browse.politicians),
        states=_options(browse.politicians, "state"),
        parties=_options(browse.politicians, "party"),
        offices=_options(browse.politicians, "office"),
    )


def select_politician(politician_id: str | None) -> PoliticianItem | None:
    """Remember the selected politician; None clears the selection."""
    browse = container.browse
    if politician_id is None:
        browse.set_selected_politician(None)
        return None

    match = next((p for p in browse.politicians if p["id"] == politician_id), None)
    if match is None:
        raise NotFoundError(f"Politician not found: {politician_id}")

    browse.set_selected_politician(match)
    return PoliticianItem(
        id=match["id"],
        name=f"{match['first_name']} {match['last_name']}",
        party=match["party"],
        state=match["state"],
        office=match["office"],
        performance_score=match["performance_score"],
    )
