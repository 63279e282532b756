"""Poll API views - thin layer over services."""

from app.container import container
from app.models.polls import Poll
from app.services.polls import CATEGORIES, STATUSES

from .schemas import PollItem, PollListResponse, PollOptionItem, PollStatsResponse


def _to_item(poll: Poll) -> PollItem:
    leader = poll.leader
    return PollItem(
        id=poll.id,
        title=poll.title,
        description=poll.description,
        category=poll.category,
        status=poll.status.value,
        total_votes=poll.total_votes,
        start_date=poll.start_date,
        end_date=poll.end_date,
        has_voted=poll.has_voted,
        options=[PollOptionItem(**o.to_dict()) for o in poll.options],
        leader=leader.text if leader else None,
    )


def list_polls(query: str = "", category: str | None = None, status: str | None = None) -> PollListResponse:
    """Search polls."""
    featured = container.polls.featured()
    return PollListResponse(
        items=[_to_item(p) for p in container.polls.search(query, category, status)],
        featured=_to_item(featured) if featured else None,
        stats=PollStatsResponse(**container.polls.stats().to_dict()),
        categories=CATEGORIES,
        statuses=STATUSES,
    )
