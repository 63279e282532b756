"""Models package - DDL and entities for all domains."""

from app.models.analysis import ComparedPolitician, ComparisonSummary, ScoreMetric
from app.models.common import BaseEntity
from app.models.factcheck import FactCheck, FactCheckStats, Verdict
from app.models.polls import Poll, PollOption, PollStats, PollStatus
from app.models.politics import (
    POLITICIAN_DDL,
    RANKING_DDL,
    TENURE_DDL,
    Politician,
    RankingEntry,
)
from app.models.reference import (
    ACCOUNT_DDL,
    OFFICE_DDL,
    REGION_DDL,
    Office,
    OperatorAccount,
    Region,
    Role,
)
from app.models.voting import VoteDirection, VoteKind, VoteTally, VoteTransition

ALL_DDL = [
    # Reference
    REGION_DDL,
    OFFICE_DDL,
    ACCOUNT_DDL,
    # Politics
    POLITICIAN_DDL,
    TENURE_DDL,
    RANKING_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    # Analysis
    "ScoreMetric",
    "ComparedPolitician",
    "ComparisonSummary",
    # Reference
    "REGION_DDL",
    "OFFICE_DDL",
    "ACCOUNT_DDL",
    "Region",
    "Office",
    "OperatorAccount",
    "Role",
    # Politics
    "POLITICIAN_DDL",
    "TENURE_DDL",
    "RANKING_DDL",
    "Politician",
    "RankingEntry",
    # Voting
    "VoteKind",
    "VoteDirection",
    "VoteTransition",
    "VoteTally",
    # Fact checks
    "FactCheck",
    "FactCheckStats",
    "Verdict",
    # Polls
    "Poll",
    "PollOption",
    "PollStats",
    "PollStatus",
    # All DDL
    "ALL_DDL",
]
