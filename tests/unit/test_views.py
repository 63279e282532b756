"""Tests for API views."""

import functools
import json

import httpx
import pytest

from app.container import container
from app.services.analysis import AnalysisService
from app.services.factcheck import FactCheckService
from app.services.session import PoliticianBrowseState, SessionStore, SessionUser
from app.services.voting import NotAuthenticatedError, VoteService
from civic_client import AnalysisClient, FactCheckClient, PoliticianClient, VotingClient
from web.api import analysis, factcheck, pages, politicians, voting
from web.api.errors import NotFoundError, ValidationError, validate_politician_ids


def factory(client_cls, handler):
    return functools.partial(client_cls, transport=httpx.MockTransport(handler))


def ok(data):
    return httpx.Response(200, json={"success": True, "data": data})


@pytest.fixture
def session(tmp_path, monkeypatch):
    store = SessionStore(tmp_path / "session.json")
    monkeypatch.setattr(container, "session", store, raising=False)
    return store


class TestFactCheckViews:
    def test_list(self, monkeypatch):
        monkeypatch.setattr(container, "factcheck", FactCheckService(), raising=False)
        resp = factcheck.list_fact_checks(category="Economy")
        assert [i.id for i in resp.items] == ["1", "3", "8"]
        assert resp.stats.total == 8
        assert resp.items[0].verdict_label == "Mostly False"

    def test_analyze_rejects_short_claim(self):
        with pytest.raises(ValidationError):
            factcheck.analyze_claim("short")

    def test_analyze_unavailable(self, monkeypatch):
        service = FactCheckService(client_factory=factory(FactCheckClient, lambda r: httpx.Response(502)))
        monkeypatch.setattr(container, "factcheck", service, raising=False)
        assert factcheck.analyze_claim("Inflation is in single digits") is None

    def test_analyze(self, monkeypatch):
        payload = {"verdict": "false", "confidence": 91, "summary": "CBN says 28.92%.", "keyPoints": ["CBN data"]}
        service = FactCheckService(client_factory=factory(FactCheckClient, lambda r: ok(payload)))
        monkeypatch.setattr(container, "factcheck", service, raising=False)

        resp = factcheck.analyze_claim("  Inflation is in single digits ")
        assert resp.claim == "Inflation is in single digits"
        assert resp.verdict_label == "False"
        assert "Verdict: FALSE" in resp.export_text


class TestAnalysisViews:
    def test_breakdown(self, monkeypatch):
        payload = {
            "politician": {"id": "a", "firstName": "Alex", "lastName": "Otti", "performanceScore": 72.5},
            "scoreBreakdown": {"Promise Fulfillment": 75, "Controversy Impact": 10},
            "aiAnalysis": {"strengths": ["Fiscal discipline"]},
        }
        service = AnalysisService(client_factory=factory(AnalysisClient, lambda r: ok(payload)))
        monkeypatch.setattr(container, "analysis", service, raising=False)

        resp = analysis.get_score_breakdown("a")
        bands = {m.name: m.band for m in resp.metrics}
        assert resp.name == "Alex Otti"
        assert bands["Promise Fulfillment"] == "good"
        assert bands["Controversy Impact"] == "poor"
        assert resp.strengths == ["Fiscal discipline"]

    def test_breakdown_unavailable(self, monkeypatch):
        service = AnalysisService(client_factory=factory(AnalysisClient, lambda r: httpx.Response(404)))
        monkeypatch.setattr(container, "analysis", service, raising=False)
        assert analysis.get_score_breakdown("missing") is None

    def test_compare_needs_two(self):
        with pytest.raises(ValidationError):
            analysis.compare_politicians(["a", "a", ""])

    def test_validate_ids_dedupes(self):
        assert validate_politician_ids(["a", "b", "a"]) == ["a", "b"]


class TestVotingViews:
    def test_requires_login(self, session, monkeypatch):
        monkeypatch.setattr(container, "voting", VoteService(session), raising=False)
        with pytest.raises(NotAuthenticatedError):
            voting.cast_vote("project", "p1", "up", up=2, down=1)

    def test_invalid_kind(self):
        with pytest.raises(ValidationError):
            voting.cast_vote("bill", "p1", "up")

    def test_cast(self, session, monkeypatch):
        session.set_credentials(SessionUser(id="u1", email="ada@example.com", role="USER"), "tok")
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return ok({"action": "changed"})

        service = VoteService(session, client_factory=factory(VotingClient, handler))
        monkeypatch.setattr(container, "voting", service, raising=False)

        resp = voting.cast_vote("promise", "p1", "down", up=5, down=3, own="up")
        assert (resp.up, resp.down, resp.own) == (4, 4, "down")
        assert seen["body"] == {"voteType": "down"}

    def test_votable_items(self, monkeypatch):
        payload = {
            "projects": [{"id": "pr1", "title": "Ring road", "upvotes": 3}],
            "promises": [{"id": "pm1", "title": "Free schooling", "status": "FULFILLED"}],
            "controversies": [],
        }
        service = AnalysisService(profile_client_factory=factory(PoliticianClient, lambda r: ok(payload)))
        monkeypatch.setattr(container, "analysis", service, raising=False)

        resp = voting.get_votable_items("a")
        assert [(i.kind, i.id, i.up) for i in resp.items] == [("project", "pr1", 3), ("promise", "pm1", 0)]


POLITICIANS = [
    {"id": "a", "first_name": "Ada", "last_name": "Obi", "party": "APC", "state": "Lagos", "office": "Governor", "performance_score": 70.0},
    {"id": "b", "first_name": "Bala", "last_name": "Musa", "party": "PDP", "state": "Kano", "office": "Senator", "performance_score": 60.0},
]


class TestPoliticianViews:
    @pytest.fixture(autouse=True)
    def browse(self, monkeypatch):
        state = PoliticianBrowseState()
        state.set_politicians(POLITICIANS)
        monkeypatch.setattr(container, "browse", state, raising=False)
        return state

    def test_filter(self):
        resp = politicians.list_politicians(state="Kano")
        assert [p.name for p in resp.items] == ["Bala Musa"]
        assert resp.total == 2
        assert resp.parties == ["APC", "PDP"]

    def test_select(self, browse):
        assert politicians.select_politician("a").name == "Ada Obi"
        assert browse.selected["id"] == "a"

    def test_select_unknown(self):
        with pytest.raises(NotFoundError):
            politicians.select_politician("zz")


class TestPages:
    def test_about(self):
        page = pages.get_about()
        assert page.title == "About The Peoples Affairs"
        assert any(s.title == "Our Mission" for s in page.sections)

    def test_privacy(self):
        page = pages.get_privacy()
        assert page.updated == "January 2024"
        assert page.sections[-1].title == "12. Contact Us"
