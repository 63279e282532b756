"""Rankings services."""

from app.services.rankings.service import RankingService

__all__ = [
    "RankingService",
]
