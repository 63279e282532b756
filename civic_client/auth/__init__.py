"""Auth API client."""

from civic_client.auth.client import AuthClient
from civic_client.auth.schemas import LoginResult, UserSchema

__all__ = [
    "AuthClient",
    "LoginResult",
    "UserSchema",
]
