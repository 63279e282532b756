"""Rankings service - per-office league tables from the local store."""

from app.models.politics import RankingEntry
from app.repositories.politics import PoliticianRepository, RankingRepository
from app.repositories.reference import OfficeRepository


class RankingService:
    """Rankings business logic."""

    def __init__(
        self,
        office_repo: OfficeRepository,
        ranking_repo: RankingRepository,
        politician_repo: PoliticianRepository,
    ):
        self._offices = office_repo
        self._rankings = ranking_repo
        self._politicians = politician_repo

    def get_offices(self) -> list[dict]:
        return self._offices.get_all()

    def get_office_ranking(self, office_id: str, limit: int = 50) -> list[RankingEntry]:
        return self._rankings.get_by_office(office_id, limit)

    def get_politician_rankings(self, politician_id: str) -> list[RankingEntry]:
        return self._rankings.get_by_politician(politician_id)

    def get_politicians(self) -> list[dict]:
        """Active politicians, best score first."""
        return self._politicians.get_all()
