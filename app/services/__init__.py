"""Services package - service class exports."""

from app.services.analysis import AnalysisService
from app.services.blogs import BlogService
from app.services.factcheck import FactCheckService
from app.services.polls import PollService
from app.services.rankings import RankingService
from app.services.session import AuthService, PoliticianBrowseState, SessionStore
from app.services.voting import VoteService

__all__ = [
    "AnalysisService",
    "AuthService",
    "BlogService",
    "FactCheckService",
    "PoliticianBrowseState",
    "PollService",
    "RankingService",
    "SessionStore",
    "VoteService",
]
