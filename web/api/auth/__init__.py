"""Auth API."""

from web.api.auth.views import get_session, login, logout

__all__ = [
    "get_session",
    "login",
    "logout",
]
