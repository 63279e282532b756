"""Fact-check domain entities."""

from dataclasses import dataclass
from datetime import date

from app.models.common import BaseEntity
from civic_client.factcheck.schemas import Verdict


@dataclass
class FactCheck(BaseEntity):
    """A published fact check of a public statement."""

    id: str
    claim: str
    claimant: str
    claimant_role: str
    date: date
    verdict: Verdict
    category: str
    summary: str
    sources: int
    views: int
    shares: int


@dataclass
class FactCheckStats(BaseEntity):
    """Verdict counts over a set of fact checks."""

    total: int
    true: int
    false: int
    mixed: int
