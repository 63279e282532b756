"""Politics domain models - politicians, tenures, rankings."""

from app.models.politics.entities import DEFAULT_SCORE, Politician, RankingEntry, politician_id
from app.models.politics.politician import POLITICIAN_DDL
from app.models.politics.ranking import RANKING_DDL
from app.models.politics.tenure import TENURE_DDL

__all__ = [
    "POLITICIAN_DDL",
    "TENURE_DDL",
    "RANKING_DDL",
    "DEFAULT_SCORE",
    "Politician",
    "RankingEntry",
    "politician_id",
]
