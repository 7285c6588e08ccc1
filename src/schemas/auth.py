"""Authentication schemas."""

from datetime import datetime

from src.schemas.common import CamelModel


class UserRegister(CamelModel):
    """User registration request.

    Fields are optional here so that missing ones get the service's fixed
    validation message instead of a schema error.
    """

    email: str | None = None
    name: str | None = None
    password: str | None = None


class UserLogin(CamelModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class UserResponse(CamelModel):
    """Public view of a user. The password hash is never included."""

    id: str
    email: str
    name: str
    created_at: datetime


class LoginData(CamelModel):
    """Token and user returned by a successful login."""

    user: UserResponse
    token: str
