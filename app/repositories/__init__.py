"""Repositories package - data access layer for our database."""

from app.repositories.base import BaseRepository
from app.repositories.db import (
    db_exists,
    get_db,
    get_write_connection,
    init_tables,
)
from app.repositories.politics import PoliticianRepository, RankingRepository
from app.repositories.reference import AccountRepository, OfficeRepository, RegionRepository

__all__ = [
    # DB
    "get_db",
    "db_exists",
    "init_tables",
    "get_write_connection",
    # Base
    "BaseRepository",
    # Reference
    "RegionRepository",
    "OfficeRepository",
    "AccountRepository",
    # Politics
    "PoliticianRepository",
    "RankingRepository",
]
