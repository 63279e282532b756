"""Auth service - login and logout against the platform API."""

from loguru import logger

from app.services.session.store import SessionStore, SessionUser
from civic_client import AuthClient


class AuthService:
    """Exchanges credentials for a token and keeps it in the session store."""

    def __init__(self, session: SessionStore, client_factory=AuthClient):
        self._session = session
        self._client_factory = client_factory

    async def login(self, email: str, password: str) -> SessionUser:
        """Log in; ApiError propagates on rejected credentials."""
        async with self._client_factory() as client:
            result = await client.login(email, password)

        user = SessionUser(
            id=result.user.id,
            email=result.user.email,
            role=result.user.role,
            first_name=result.user.first_name,
            last_name=result.user.last_name,
        )
        self._session.set_credentials(user, result.token)
        logger.debug("Session stored for {} (role: {})", user.email, user.role)
        return user

    def logout(self) -> None:
        self._session.logout()
