"""Ranking repository - per-office rankings."""

from datetime import datetime

import polars as pl
from loguru import logger

from app.models.politics import RankingEntry
from app.repositories.base import BaseRepository


class RankingRepository(BaseRepository):
    """Repository for ranking data access."""

    def replace_rankings(self, rankings: pl.DataFrame) -> None:
        """Replace every stored ranking with a freshly computed set."""
        self._require_writable()
        rankings_df = rankings.select("politician_id", "office_id", "rank", "total_score").with_columns(
            pl.lit(datetime.now()).alias("calculated_at")
        )

        self.execute("BEGIN TRANSACTION")
        try:
            self.execute("DELETE FROM ranking")
            self._db.register("rankings_df", rankings_df)
            self.execute("INSERT INTO ranking SELECT * FROM rankings_df")
            self._db.unregister("rankings_df")
            self.execute("COMMIT")
        except Exception:
            self.execute("ROLLBACK")
            raise
        self.clear_cache()
        logger.debug("Rankings written: {}", rankings_df.height)

    def get_by_office(self, office_id: str, limit: int = 50) -> list[RankingEntry]:
        """Rankings within one office, best first."""

        def fetch():
            rows = self.fetchall(
                """
                SELECT rk.rank, p.id, p.first_name || ' ' || p.last_name, p.party, r.name, o.name, rk.total_score
                FROM ranking rk
                JOIN politician p ON p.id = rk.politician_id
                JOIN office o ON o.id = rk.office_id
                LEFT JOIN region r ON r.code = p.region_code
                WHERE rk.office_id = ?
                ORDER BY rk.rank
                LIMIT ?
                """,
                [office_id, limit],
            )
            return [RankingEntry(*r) for r in rows]

        return self._cached(f"ranking_{office_id}_{limit}", fetch)

    def get_by_politician(self, politician_id: str) -> list[RankingEntry]:
        """Every ranking a politician appears in."""
        rows = self.fetchall(
            """
            SELECT rk.rank, p.id, p.first_name || ' ' || p.last_name, p.party, r.name, o.name, rk.total_score
            FROM ranking rk
            JOIN politician p ON p.id = rk.politician_id
            JOIN office o ON o.id = rk.office_id
            LEFT JOIN region r ON r.code = p.region_code
            WHERE rk.politician_id = ?
            ORDER BY o.name
            """,
            [politician_id],
        )
        return [RankingEntry(*r) for r in rows]
