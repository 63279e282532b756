"""Reference data loader - idempotent upserts by natural key."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import duckdb
from loguru import logger

from app.models.politics import Politician
from app.models.reference import Office, OperatorAccount, Region
from app.repositories.politics import PoliticianRepository, RankingRepository
from app.repositories.reference import AccountRepository, OfficeRepository, RegionRepository
from etl.ranking import compute_rankings
from etl.reference_data import INAUGURATION_DATE, OFFICES, POLITICIANS, REGIONS


class SeedError(Exception):
    """Upserting one seed record failed."""

    def __init__(self, kind: str, key: str, reason: str | None = None):
        self.kind = kind
        self.key = key
        self.message = f"Failed to seed {kind} {key!r}" + (f": {reason}" if reason else "")
        super().__init__(self.message)


@dataclass
class SeedReport:
    """Rows written per entity kind."""

    regions: int = 0
    offices: int = 0
    operators: int = 0
    politicians: int = 0
    tenures_created: int = 0
    rankings: int = 0


def _upsert_each(kind: str, items: Iterable, key: Callable[[Any], str], upsert: Callable[[Any], object]) -> int:
    """Upsert records one by one; the first failure stops the run."""
    count = 0
    for item in items:
        try:
            upsert(item)
        except duckdb.Error as e:
            raise SeedError(kind, key(item), str(e)) from e
        count += 1
    return count


def seed_reference(
    conn: duckdb.DuckDBPyConnection,
    operator: OperatorAccount,
    regions: Iterable[Region] = REGIONS,
    offices: Iterable[Office] = OFFICES,
    report: SeedReport | None = None,
) -> SeedReport:
    """Upsert regions, offices and the operator account."""
    report = report or SeedReport()

    accounts = AccountRepository(conn=conn)
    report.operators = _upsert_each("operator", [operator], lambda a: a.email, accounts.upsert_operator)

    region_repo = RegionRepository(conn=conn)
    report.regions = _upsert_each("region", regions, lambda r: r.code, region_repo.upsert)
    logger.info("Regions: {} created/updated", report.regions)

    office_repo = OfficeRepository(conn=conn)
    report.offices = _upsert_each("office", offices, lambda o: o.name, office_repo.upsert)
    logger.info("Offices: {} created/updated", report.offices)

    return report


def seed_politicians(
    conn: duckdb.DuckDBPyConnection,
    politicians: Iterable[Politician] = POLITICIANS,
    report: SeedReport | None = None,
) -> SeedReport:
    """Upsert politicians with their current tenure, then rerank every office."""
    report = report or SeedReport()

    region_codes = RegionRepository(conn=conn).code_by_name()
    office_ids = OfficeRepository(conn=conn).id_by_category()
    repo = PoliticianRepository(conn=conn)

    def upsert(p: Politician) -> None:
        if p.region and p.region not in region_codes:
            raise SeedError("politician", p.id, f"unknown region {p.region!r}")
        if p.office and p.office not in office_ids:
            raise SeedError("politician", p.id, f"unknown office {p.office!r}")

        repo.upsert(p, region_codes.get(p.region))
        if p.office and repo.ensure_tenure(p.id, office_ids[p.office], INAUGURATION_DATE):
            report.tenures_created += 1
        logger.debug("Created/updated: {} ({})", p.full_name, p.office)

    report.politicians = _upsert_each("politician", politicians, lambda p: p.id, upsert)
    logger.info("Politicians: {} created/updated, {} new tenures", report.politicians, report.tenures_created)

    rankings = compute_rankings(repo.get_current_scores())
    try:
        RankingRepository(conn=conn).replace_rankings(rankings)
    except duckdb.Error as e:
        raise SeedError("rankings", "all offices", str(e)) from e
    report.rankings = rankings.height
    logger.info("Rankings: {} across {} offices", rankings.height, rankings["office_id"].n_unique())

    return report


def seed_all(
    conn: duckdb.DuckDBPyConnection,
    operator: OperatorAccount,
    with_politicians: bool = True,
) -> SeedReport:
    """Main seed entry point."""
    logger.info("Starting database seed...")
    report = seed_reference(conn, operator)
    if with_politicians:
        seed_politicians(conn, report=report)
    logger.info("Database seed completed: {}", report)
    return report
