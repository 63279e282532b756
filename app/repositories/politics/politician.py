"""Politician repository - politicians and their tenures."""

from datetime import date

from app.models.politics import DEFAULT_SCORE, Politician
from app.repositories.base import BaseRepository


class PoliticianRepository(BaseRepository):
    """Repository for politician and tenure data access."""

    def upsert(self, politician: Politician, region_code: str | None) -> str:
        """Insert or update a politician by name slug. Returns the id."""
        self._require_writable()
        self.execute(
            """
            INSERT INTO politician
                (id, first_name, last_name, middle_name, party, region_code, biography,
                 date_of_birth, performance_score, integrity_status, is_active)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 'VERIFIED', TRUE)
            ON CONFLICT (id) DO UPDATE SET
                middle_name = EXCLUDED.middle_name,
                party = EXCLUDED.party,
                region_code = EXCLUDED.region_code,
                biography = EXCLUDED.biography,
                date_of_birth = EXCLUDED.date_of_birth,
                performance_score = EXCLUDED.performance_score,
                integrity_status = 'VERIFIED',
                is_active = TRUE
            """,
            [
                politician.id,
                politician.first_name,
                politician.last_name,
                politician.middle_name,
                politician.party,
                region_code,
                politician.biography,
                politician.date_of_birth,
                politician.performance_score or DEFAULT_SCORE,
            ],
        )
        return politician.id

    def ensure_tenure(self, politician_id: str, office_id: str, start_date: date) -> bool:
        """Make office_id the politician's current office. Returns True if a tenure was created or reopened."""
        self._require_writable()
        self.execute(
            "UPDATE tenure SET is_current = FALSE WHERE politician_id = ? AND office_id <> ? AND is_current",
            [politician_id, office_id],
        )
        existing = self.fetchone(
            "SELECT 1 FROM tenure WHERE politician_id = ? AND office_id = ? AND is_current",
            [politician_id, office_id],
        )
        if existing:
            return False
        self.execute(
            """
            INSERT INTO tenure (politician_id, office_id, start_date, is_current) VALUES (?, ?, ?, TRUE)
            ON CONFLICT (politician_id, office_id) DO UPDATE SET is_current = TRUE
            """,
            [politician_id, office_id, start_date],
        )
        return True

    def get_all(self) -> list[dict]:
        """Politicians with their region and current office."""

        def fetch():
            query = """
                SELECT p.id, p.first_name, p.last_name, p.party, r.name, o.name, p.performance_score
                FROM politician p
                LEFT JOIN region r ON r.code = p.region_code
                LEFT JOIN tenure t ON t.politician_id = p.id AND t.is_current
                LEFT JOIN office o ON o.id = t.office_id
                WHERE p.is_active
                ORDER BY p.performance_score DESC, p.id
            """
            return [
                {
                    "id": r[0],
                    "first_name": r[1],
                    "last_name": r[2],
                    "party": r[3],
                    "state": r[4],
                    "office": r[5],
                    "performance_score": r[6],
                }
                for r in self.fetchall(query)
            ]

        return self._cached("politicians", fetch)

    def get_current_scores(self) -> list[dict]:
        """Score of every politician per office they currently hold."""
        rows = self.fetchall(
            """
            SELECT t.politician_id, t.office_id, p.performance_score
            FROM tenure t JOIN politician p ON p.id = t.politician_id
            WHERE t.is_current AND p.is_active
            """
        )
        return [{"politician_id": r[0], "office_id": r[1], "total_score": float(r[2])} for r in rows]
