"""Politicians API client."""

from civic_client.politicians.client import PoliticianClient
from civic_client.politicians.schemas import PoliticianProfile, ProfileItem

__all__ = [
    "PoliticianClient",
    "PoliticianProfile",
    "ProfileItem",
]
