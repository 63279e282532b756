"""Region repository - states and their zones."""

from app.models.reference import Region
from app.repositories.base import BaseRepository


class RegionRepository(BaseRepository):
    """Repository for region data access."""

    def upsert(self, region: Region) -> None:
        """Insert or update a region by code."""
        self._require_writable()
        self.execute(
            """
            INSERT INTO region (code, name, zone) VALUES (?, ?, ?)
            ON CONFLICT (code) DO UPDATE SET name = EXCLUDED.name, zone = EXCLUDED.zone
            """,
            [region.code, region.name, region.zone],
        )

    def get(self, code: str) -> Region | None:
        row = self.fetchone("SELECT code, name, zone FROM region WHERE code = ?", [code])
        return Region(*row) if row else None

    def get_all(self) -> list[Region]:
        """All regions ordered by name."""
        return [Region(*r) for r in self.fetchall("SELECT code, name, zone FROM region ORDER BY name")]

    def code_by_name(self) -> dict[str, str]:
        """Map of region name to code."""
        return {r.name: r.code for r in self.get_all()}
