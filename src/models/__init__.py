"""In-memory record models."""

from src.models.enums import Priority
from src.models.todo import Todo
from src.models.user import User

__all__ = [
    "Priority",
    "Todo",
    "User",
]
