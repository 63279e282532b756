"""Auth API client."""

from civic_client.auth.schemas import LoginResult
from civic_client.base import BaseClient


class AuthClient(BaseClient):
    """Client for authentication endpoints."""

    async def login(self, email: str, password: str) -> LoginResult:
        """POST /auth/login - exchange credentials for a token."""
        data = await self._post("auth/login", {"email": email, "password": password})
        return LoginResult.model_validate(data)
