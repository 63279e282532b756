"""Dependency Injection container - initialized at app startup."""

from app.repositories.politics import PoliticianRepository, RankingRepository
from app.repositories.reference import OfficeRepository
from app.services.analysis import AnalysisService
from app.services.blogs import BlogService
from app.services.factcheck import FactCheckService
from app.services.polls import PollService
from app.services.rankings import RankingService
from app.services.session import AuthService, PoliticianBrowseState, SessionStore
from app.services.voting import VoteService
from civic_client import set_api_config
from settings import API_BASE_URL, API_TIMEOUT, SESSION_PATH


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        set_api_config(API_BASE_URL, API_TIMEOUT)

        # Repositories (singletons, read-only)
        self._office_repo = OfficeRepository()
        self._ranking_repo = RankingRepository()
        self._politician_repo = PoliticianRepository()

        # Client state
        self.session = SessionStore(SESSION_PATH)
        self.browse = PoliticianBrowseState()

        # Services (with injected repos)
        self.rankings = RankingService(
            office_repo=self._office_repo,
            ranking_repo=self._ranking_repo,
            politician_repo=self._politician_repo,
        )
        self.analysis = AnalysisService()
        self.factcheck = FactCheckService()
        self.polls = PollService()
        self.blogs = BlogService()
        self.auth = AuthService(session=self.session)
        self.voting = VoteService(session=self.session)

        self._initialized = True


# Global container instance
container = Container()
