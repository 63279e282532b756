"""Tests for public opinion polls."""

from datetime import date

import pytest

from app.container import container
from app.models.polls import Poll, PollStatus
from app.services.polls import POLLS, PollService, featured_poll, filter_polls, poll_stats
from web.api import polls


def make_poll(poll_id, status, votes=0, has_voted=False):
    return Poll(
        id=poll_id,
        title=f"Poll {poll_id}",
        description="",
        category="States",
        status=status,
        total_votes=votes,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 12, 31),
        has_voted=has_voted,
    )


class TestCatalog:
    def test_stats(self):
        stats = poll_stats(POLLS)
        assert (stats.active, stats.total_votes, stats.voted) == (3, 62000, 2)

    def test_query_matches_title_case_insensitive(self):
        assert [p.id for p in filter_polls(POLLS, query="BEST")] == ["1", "4"]

    def test_category_and_status(self):
        assert [p.id for p in filter_polls(POLLS, category="Governors")] == ["1"]
        assert [p.id for p in filter_polls(POLLS, status="ended")] == ["4"]
        assert filter_polls(POLLS, category="Governors", status=PollStatus.ENDED) == []

    def test_no_filters_returns_all(self):
        assert filter_polls(POLLS) == POLLS

    def test_featured_is_first_active(self):
        items = [make_poll("a", PollStatus.ENDED), make_poll("b", PollStatus.ACTIVE), make_poll("c", PollStatus.ACTIVE)]
        assert featured_poll(items).id == "b"
        assert featured_poll(items[:1]) is None

    def test_leader(self):
        by_id = {p.id: p for p in POLLS}
        assert by_id["3"].leader.text == "Good"
        assert by_id["5"].leader is None

    @pytest.mark.parametrize("poll", POLLS, ids=lambda p: p.title)
    def test_option_votes_add_up(self, poll):
        assert sum(o.votes for o in poll.options) == poll.total_votes


class TestPollService:
    def test_stats_ignore_filters(self):
        service = PollService([make_poll("a", PollStatus.ACTIVE, 10, True), make_poll("b", PollStatus.UPCOMING)])
        assert service.search(status="upcoming")[0].id == "b"
        assert service.stats().to_dict() == {"active": 1, "total_votes": 10, "voted": 1}


class TestPollViews:
    def test_list(self, monkeypatch):
        monkeypatch.setattr(container, "polls", PollService(), raising=False)
        resp = polls.list_polls(status="active")
        assert [p.id for p in resp.items] == ["1", "2", "3"]
        assert resp.featured.id == "1"
        assert resp.featured.leader == "Seyi Makinde (Oyo)"
        assert resp.stats.total_votes == 62000
        assert resp.statuses == ["active", "ended", "upcoming"]
        assert resp.items[0].options[1].percentage == 30.4

    def test_list_without_active_polls(self, monkeypatch):
        monkeypatch.setattr(container, "polls", PollService([make_poll("a", PollStatus.ENDED)]), raising=False)
        resp = polls.list_polls()
        assert resp.featured is None
        assert resp.items[0].leader is None
