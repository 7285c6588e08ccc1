"""User model."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True)
class User:
    """User record for authentication and ownership. Never updated after creation."""

    id: str
    email: str
    name: str
    password_hash: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
