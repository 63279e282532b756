"""Reference repositories."""

from app.repositories.reference.account import AccountRepository
from app.repositories.reference.office import OfficeRepository
from app.repositories.reference.region import RegionRepository

__all__ = [
    "AccountRepository",
    "OfficeRepository",
    "RegionRepository",
]
