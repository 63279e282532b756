"""Auth API views - thin layer over services."""

import asyncio

import httpx

from app.container import container
from civic_client import ApiError
from web.api.errors import ValidationError

from .schemas import SessionResponse


def get_session() -> SessionResponse:
    """Who is logged in, if anyone."""
    user = container.session.user
    if not container.session.is_authenticated or user is None:
        return SessionResponse(authenticated=False)

    name = " ".join(n for n in (user.first_name, user.last_name) if n) or None
    return SessionResponse(authenticated=True, email=user.email, name=name, role=user.role)


def login(email: str, password: str) -> SessionResponse:
    """Log in with email and password."""
    if not email or not password:
        raise ValidationError("Email and password are required")

    try:
        asyncio.run(container.auth.login(email.strip(), password))
    except ApiError as e:
        raise ValidationError(e.message) from e
    except httpx.HTTPError as e:
        raise ValidationError("Login service unavailable") from e

    return get_session()


def logout() -> SessionResponse:
    container.auth.logout()
    return get_session()
