"""Office repository - government office types."""

from app.models.reference import Office
from app.repositories.base import BaseRepository


class OfficeRepository(BaseRepository):
    """Repository for office data access."""

    def upsert(self, office: Office) -> str:
        """Insert or update an office by name. Returns the office id."""
        self._require_writable()
        self.execute(
            """
            INSERT INTO office (name, id, category, level, description) VALUES (?, ?, ?, ?, ?)
            ON CONFLICT (name) DO UPDATE SET
                category = EXCLUDED.category,
                level = EXCLUDED.level,
                description = EXCLUDED.description
            """,
            [office.name, office.id, office.category, office.level, office.description],
        )
        return self.fetchone("SELECT id FROM office WHERE name = ?", [office.name])[0]

    def get_all(self) -> list[dict]:
        """All offices, federal first."""

        def fetch():
            rows = self.fetchall(
                """
                SELECT id, name, category, level, description FROM office
                ORDER BY CASE level WHEN 'Federal' THEN 0 WHEN 'State' THEN 1 ELSE 2 END, name
                """
            )
            return [
                {"id": r[0], "name": r[1], "category": r[2], "level": r[3], "description": r[4]}
                for r in rows
            ]

        return self._cached("offices", fetch)

    def id_by_category(self) -> dict[str, str]:
        """Map of office category tag to office id."""
        return {r[0]: r[1] for r in self.fetchall("SELECT category, id FROM office")}
