"""Politics repositories."""

from app.repositories.politics.politician import PoliticianRepository
from app.repositories.politics.ranking import RankingRepository

__all__ = [
    "PoliticianRepository",
    "RankingRepository",
]
