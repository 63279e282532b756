"""Published fact checks and their search/filter logic."""

from datetime import date

from app.models.factcheck import FactCheck, FactCheckStats, Verdict

CATEGORIES = ["Economy", "Education", "Infrastructure", "Security", "Health", "Employment"]

TRUE_VERDICTS = {Verdict.TRUE, Verdict.MOSTLY_TRUE}
FALSE_VERDICTS = {Verdict.FALSE, Verdict.MOSTLY_FALSE}
MIXED_VERDICTS = {Verdict.HALF_TRUE, Verdict.UNVERIFIABLE}

FACT_CHECKS = [
    FactCheck(
        id="1",
        claim="Nigeria's GDP grew by 15% in the last quarter",
        claimant="Bola Tinubu",
        claimant_role="President of Nigeria",
        date=date(2024, 1, 20),
        verdict=Verdict.MOSTLY_FALSE,
        category="Economy",
        summary="Official NBS data shows GDP growth was 2.54% in Q3 2023, not 15% as claimed.",
        sources=5,
        views=12500,
        shares=890,
    ),
    FactCheck(
        id="2",
        claim="Lagos State has built 500 new schools in the past year",
        claimant="Babajide Sanwo-Olu",
        claimant_role="Governor of Lagos State",
        date=date(2024, 1, 18),
        verdict=Verdict.HALF_TRUE,
        category="Education",
        summary=(
            "Records show 127 new schools were built, with 373 renovations. "
            "The claim conflates new construction with renovations."
        ),
        sources=4,
        views=8900,
        shares=456,
    ),
    FactCheck(
        id="3",
        claim="Inflation rate has dropped to single digits",
        claimant="Wale Edun",
        claimant_role="Minister of Finance",
        date=date(2024, 1, 15),
        verdict=Verdict.FALSE,
        category="Economy",
        summary="CBN data confirms inflation remains at 28.92% as of December 2023, far from single digits.",
        sources=6,
        views=25000,
        shares=2100,
    ),
    FactCheck(
        id="4",
        claim="Kano State achieved 95% primary school enrollment",
        claimant="Abba Kabir Yusuf",
        claimant_role="Governor of Kano State",
        date=date(2024, 1, 12),
        verdict=Verdict.MOSTLY_TRUE,
        category="Education",
        summary="UBEC records show enrollment at 91.3%, close to the claimed figure.",
        sources=3,
        views=5600,
        shares=234,
    ),
    FactCheck(
        id="5",
        claim="Nigeria now generates 10,000MW of electricity",
        claimant="Adebayo Adelabu",
        claimant_role="Minister of Power",
        date=date(2024, 1, 10),
        verdict=Verdict.FALSE,
        category="Infrastructure",
        summary="Grid data shows peak generation of 5,528MW, with average around 4,000MW.",
        sources=4,
        views=18700,
        shares=1560,
    ),
    FactCheck(
        id="6",
        claim="Crime rate in Abuja reduced by 40%",
        claimant="Nyesom Wike",
        claimant_role="FCT Minister",
        date=date(2024, 1, 8),
        verdict=Verdict.UNVERIFIABLE,
        category="Security",
        summary="No comprehensive crime statistics are publicly available to verify this claim.",
        sources=2,
        views=9200,
        shares=678,
    ),
    FactCheck(
        id="7",
        claim="Over 2 million jobs created through youth empowerment programs",
        claimant="Federal Government",
        claimant_role="Official Statement",
        date=date(2024, 1, 5),
        verdict=Verdict.HALF_TRUE,
        category="Employment",
        summary="Records show 1.2 million enrollments, but job creation figures are unverified.",
        sources=5,
        views=14300,
        shares=890,
    ),
    FactCheck(
        id="8",
        claim="Rivers State has the lowest poverty rate in Nigeria",
        claimant="Siminalayi Fubara",
        claimant_role="Governor of Rivers State",
        date=date(2024, 1, 2),
        verdict=Verdict.TRUE,
        category="Economy",
        summary="NBS Multidimensional Poverty Index confirms Rivers State at 23.9%, the lowest nationally.",
        sources=3,
        views=7800,
        shares=445,
    ),
]


def filter_fact_checks(
    items: list[FactCheck],
    query: str = "",
    verdict: Verdict | str | None = None,
    category: str | None = None,
) -> list[FactCheck]:
    """Substring search on claim/claimant plus exact verdict and category match."""
    needle = query.lower()
    return [
        fc
        for fc in items
        if (needle in fc.claim.lower() or needle in fc.claimant.lower())
        and (not verdict or fc.verdict == verdict)
        and (not category or fc.category == category)
    ]


def fact_check_stats(items: list[FactCheck]) -> FactCheckStats:
    """Count verdicts in the true, false and mixed groups."""
    return FactCheckStats(
        total=len(items),
        true=sum(fc.verdict in TRUE_VERDICTS for fc in items),
        false=sum(fc.verdict in FALSE_VERDICTS for fc in items),
        mixed=sum(fc.verdict in MIXED_VERDICTS for fc in items),
    )
