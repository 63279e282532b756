"""Auth API response schemas."""

from pydantic import BaseModel


class SessionResponse(BaseModel):
    """Current login state."""

    authenticated: bool
    email: str | None = None
    name: str | None = None
    role: str | None = None
