"""Politics domain entities."""

import re
from dataclasses import dataclass
from datetime import date

from app.models.common import BaseEntity

DEFAULT_SCORE = 50.0


def politician_id(first_name: str, last_name: str) -> str:
    """Stable slug used as the politician natural key."""
    return re.sub(r"[^a-z0-9]+", "-", f"{first_name} {last_name}".lower()).strip("-")


@dataclass
class Politician(BaseEntity):
    """Politician seed record."""

    first_name: str
    last_name: str
    party: str
    region: str
    office: str
    biography: str
    middle_name: str | None = None
    date_of_birth: date | None = None
    performance_score: float = DEFAULT_SCORE

    @property
    def id(self) -> str:
        return politician_id(self.first_name, self.last_name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass
class RankingEntry(BaseEntity):
    """A politician's position within an office ranking."""

    rank: int
    politician_id: str
    name: str
    party: str | None
    region: str | None
    office: str
    total_score: float
