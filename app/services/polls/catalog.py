"""Public opinion polls and their search/filter logic."""

from datetime import date

from app.models.polls import Poll, PollOption, PollStats, PollStatus

CATEGORIES = ["Governors", "Ministers", "Senators", "Federal", "States"]
STATUSES = [s.value for s in PollStatus]

POLLS = [
    Poll(
        id="1",
        title="Best Performing Governor 2024",
        description="Vote for the governor who has delivered the most impactful projects and policies in 2024.",
        category="Governors",
        status=PollStatus.ACTIVE,
        total_votes=12500,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        options=[
            PollOption("1", "Seyi Makinde (Oyo)", 4500, 36),
            PollOption("2", "Babajide Sanwo-Olu (Lagos)", 3800, 30.4),
            PollOption("3", "Godwin Obaseki (Edo)", 2200, 17.6),
            PollOption("4", "Peter Mbah (Enugu)", 2000, 16),
        ],
    ),
    Poll(
        id="2",
        title="Most Transparent Minister",
        description="Which minister has shown the most transparency in their operations and decision-making?",
        category="Ministers",
        status=PollStatus.ACTIVE,
        total_votes=8900,
        start_date=date(2024, 2, 1),
        end_date=date(2024, 6, 30),
        options=[
            PollOption("1", "Wale Edun", 3200, 36),
            PollOption("2", "Nyesom Wike", 2800, 31.5),
            PollOption("3", "Festus Keyamo", 1500, 16.8),
            PollOption("4", "Dele Alake", 1400, 15.7),
        ],
        has_voted=True,
    ),
    Poll(
        id="3",
        title="Presidential Performance Rating",
        description="How would you rate the overall performance of the current administration?",
        category="Federal",
        status=PollStatus.ACTIVE,
        total_votes=25000,
        start_date=date(2024, 1, 15),
        end_date=date(2024, 12, 31),
        options=[
            PollOption("1", "Excellent", 5000, 20),
            PollOption("2", "Good", 7500, 30),
            PollOption("3", "Average", 6250, 25),
            PollOption("4", "Poor", 3750, 15),
            PollOption("5", "Very Poor", 2500, 10),
        ],
    ),
    Poll(
        id="4",
        title="Best Senator 2023",
        description="Vote for the best performing senator of 2023.",
        category="Senators",
        status=PollStatus.ENDED,
        total_votes=15600,
        start_date=date(2023, 1, 1),
        end_date=date(2023, 12, 31),
        options=[
            PollOption("1", "Opeyemi Bamidele", 5200, 33.3),
            PollOption("2", "Adams Oshiomhole", 4800, 30.8),
            PollOption("3", "Ned Nwoko", 3200, 20.5),
            PollOption("4", "Dino Melaye", 2400, 15.4),
        ],
        has_voted=True,
    ),
    Poll(
        id="5",
        title="Infrastructure Development Poll",
        description="Which state has made the most progress in infrastructure development?",
        category="States",
        status=PollStatus.UPCOMING,
        total_votes=0,
        start_date=date(2024, 3, 1),
        end_date=date(2024, 9, 30),
        options=[
            PollOption("1", "Lagos"),
            PollOption("2", "Rivers"),
            PollOption("3", "Oyo"),
        ],
    ),
]


def filter_polls(
    items: list[Poll],
    query: str = "",
    category: str | None = None,
    status: PollStatus | str | None = None,
) -> list[Poll]:
    """Substring search on the title plus exact category and status match."""
    needle = query.lower()
    return [
        p
        for p in items
        if needle in p.title.lower()
        and (not category or p.category == category)
        and (not status or p.status == status)
    ]


def featured_poll(items: list[Poll]) -> Poll | None:
    """First active poll, shown above the list."""
    return next((p for p in items if p.status == PollStatus.ACTIVE), None)


def poll_stats(items: list[Poll]) -> PollStats:
    return PollStats(
        active=sum(p.status == PollStatus.ACTIVE for p in items),
        total_votes=sum(p.total_votes for p in items),
        voted=sum(p.has_voted for p in items),
    )
