"""Todo model."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from src.models.enums import Priority


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def next_update_time(previous: datetime) -> datetime:
    """Return a timestamp strictly later than ``previous``.

    The wall clock can repeat a value between two quick mutations.
    """
    now = utcnow()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


@dataclass(frozen=True)
class Todo:
    """A task owned by the user who created it."""

    id: str
    title: str
    category: str
    owner_id: str
    description: str | None = None
    completed: bool = False
    priority: Priority | None = None
    due_date: datetime | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
