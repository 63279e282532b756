"""Platform API client package."""

from civic_client.analysis import AnalysisClient
from civic_client.auth import AuthClient
from civic_client.base import BaseClient, safe_request, set_api_config
from civic_client.blogs import BlogClient
from civic_client.errors import ApiError
from civic_client.factcheck import FactCheckClient
from civic_client.politicians import PoliticianClient
from civic_client.voting import VotingClient

__all__ = [
    # Base
    "BaseClient",
    "ApiError",
    "safe_request",
    "set_api_config",
    # Clients
    "AnalysisClient",
    "AuthClient",
    "BlogClient",
    "FactCheckClient",
    "PoliticianClient",
    "VotingClient",
]
