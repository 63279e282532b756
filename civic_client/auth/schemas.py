"""Auth API schemas."""

from pydantic import BaseModel, Field


class UserSchema(BaseModel):
    """Authenticated user profile."""

    id: str
    email: str
    first_name: str | None = Field(alias="firstName", default=None)
    last_name: str | None = Field(alias="lastName", default=None)
    role: str

    class Config:
        populate_by_name = True


class LoginResult(BaseModel):
    """POST /auth/login payload."""

    user: UserSchema
    token: str
