"""Client-held state."""

from app.services.session.auth import AuthService
from app.services.session.browse import PoliticianBrowseState
from app.services.session.store import SessionStore, SessionUser

__all__ = [
    "AuthService",
    "PoliticianBrowseState",
    "SessionStore",
    "SessionUser",
]
