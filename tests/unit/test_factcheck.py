"""Tests for fact checks and claim analysis."""

import asyncio
import functools

import httpx
import pytest

from app.services.factcheck import (
    FACT_CHECKS,
    FactCheckService,
    fact_check_stats,
    filter_fact_checks,
    format_fact_check_result,
)
from civic_client import FactCheckClient
from civic_client.factcheck import FactCheckResult, Verdict
from web.api.errors import ValidationError, validate_claim

RESULT = FactCheckResult(
    verdict=Verdict.HALF_TRUE,
    confidence=64,
    summary="Partly accurate.",
    key_points=["New schools: 127", "Renovations: 373"],
    sources=["SUBEB", "Lagos MoE"],
)


class TestCatalog:
    def test_stats(self):
        stats = fact_check_stats(FACT_CHECKS)
        assert (stats.total, stats.true, stats.false, stats.mixed) == (8, 2, 3, 3)

    def test_stats_groups_cover_every_item(self):
        stats = fact_check_stats(FACT_CHECKS)
        assert stats.true + stats.false + stats.mixed == stats.total

    def test_query_matches_claimant_case_insensitive(self):
        result = filter_fact_checks(FACT_CHECKS, query="tinubu")
        assert [f.id for f in result] == ["1"]

    def test_query_matches_claim(self):
        assert {f.id for f in filter_fact_checks(FACT_CHECKS, query="inflation")} == {"3"}

    def test_category(self):
        assert {f.id for f in filter_fact_checks(FACT_CHECKS, category="Economy")} == {"1", "3", "8"}

    def test_verdict_as_string(self):
        assert {f.id for f in filter_fact_checks(FACT_CHECKS, verdict="false")} == {"3", "5"}

    def test_filters_combine(self):
        assert filter_fact_checks(FACT_CHECKS, query="schools", category="Economy") == []

    def test_empty_filters_return_all(self):
        assert filter_fact_checks(FACT_CHECKS, "", None, None) == FACT_CHECKS


class TestExport:
    def test_format(self):
        text = format_fact_check_result("Lagos built 500 schools", RESULT)
        assert text.startswith("Claim: Lagos built 500 schools\n\nVerdict: HALF-TRUE\nConfidence: 64%")
        assert "Key Points:\n- New schools: 127\n- Renovations: 373" in text
        assert text.endswith("Sources: SUBEB, Lagos MoE")


class TestClaimValidation:
    @pytest.mark.parametrize("claim", ["", "   ", "too short", "x" * 1001, None])
    def test_rejected(self, claim):
        with pytest.raises(ValidationError):
            validate_claim(claim)

    def test_bounds_accepted(self):
        assert validate_claim("x" * 10) == "x" * 10
        assert validate_claim("x" * 1000) == "x" * 1000

    def test_stripped(self):
        assert validate_claim("  Inflation is falling  ") == "Inflation is falling"


class TestAnalyze:
    def test_unavailable_returns_none(self):
        factory = functools.partial(FactCheckClient, transport=httpx.MockTransport(lambda r: httpx.Response(503)))
        service = FactCheckService(client_factory=factory)
        assert asyncio.run(service.analyze("Inflation is in single digits")) is None

    def test_result(self):
        payload = RESULT.model_dump(by_alias=True, mode="json")
        handler = lambda r: httpx.Response(200, json={"success": True, "data": payload})  # noqa: E731
        service = FactCheckService(client_factory=functools.partial(FactCheckClient, transport=httpx.MockTransport(handler)))

        result = asyncio.run(service.analyze("Inflation is in single digits"))
        assert result.verdict == Verdict.HALF_TRUE
        assert result.key_points == RESULT.key_points

    def test_search_and_stats(self):
        service = FactCheckService(items=FACT_CHECKS[:2])
        assert service.stats().total == 2
        assert [f.id for f in service.search(category="Education")] == ["2"]
