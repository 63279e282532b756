"""Fact-check services."""

from app.services.factcheck.catalog import (
    CATEGORIES,
    FACT_CHECKS,
    fact_check_stats,
    filter_fact_checks,
)
from app.services.factcheck.service import FactCheckService, format_fact_check_result

__all__ = [
    "CATEGORIES",
    "FACT_CHECKS",
    "FactCheckService",
    "fact_check_stats",
    "filter_fact_checks",
    "format_fact_check_result",
]
