"""ETL package - reference data seeding."""

from etl.seed import SeedError, SeedReport, seed_all, seed_politicians, seed_reference
from etl.validation import validate_seed

__all__ = [
    "SeedError",
    "SeedReport",
    "seed_all",
    "seed_politicians",
    "seed_reference",
    "validate_seed",
]
