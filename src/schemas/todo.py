"""Todo schemas."""

from datetime import datetime

from pydantic import BaseModel

from src.models.enums import Priority
from src.schemas.common import CamelModel


class TodoCreate(CamelModel):
    """Create a new todo. The owner always comes from the caller's token."""

    title: str | None = None
    description: str | None = None
    category: str | None = None
    priority: Priority | None = None
    due_date: datetime | None = None


class TodoUpdate(CamelModel):
    """Partial update of a todo. Only fields sent by the client are applied."""

    title: str | None = None
    description: str | None = None
    category: str | None = None
    completed: bool | None = None
    priority: Priority | None = None
    due_date: datetime | None = None


class TodoResponse(CamelModel):
    """Todo response."""

    id: str
    title: str
    description: str | None
    category: str
    completed: bool
    priority: Priority | None
    owner_id: str
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime


class TodoListResponse(BaseModel):
    """Filtered todos with their count."""

    success: bool = True
    data: list[TodoResponse]
    count: int
