"""Todo service: CRUD and filtering over the todo store."""

import dataclasses
import logging
from datetime import datetime
from typing import Any

from src.database import TodoStore
from src.exceptions import ValidationError
from src.models.enums import Priority
from src.models.todo import Todo, next_update_time, utcnow
from src.services.authorization import authorize_owner
from src.services.todo_filters import TodoFilters, apply_filters

logger = logging.getLogger(__name__)

# Fields a caller may change. id, owner_id and the timestamps are never taken from input.
UPDATABLE_FIELDS = ("title", "description", "category", "completed", "priority", "due_date")

# Fields that cannot be cleared, so a null in the patch leaves them alone
NON_NULLABLE_FIELDS = ("title", "category", "completed")

# Fields that must stay non-empty
REQUIRED_TEXT_FIELDS = ("title", "category")


class TodoService:
    """Service for todo operations."""

    def __init__(self, store: TodoStore):
        self.store = store

    def list_todos(self, filters: TodoFilters | None = None) -> list[Todo]:
        return apply_filters(self.store.all(), filters or TodoFilters())

    def get_todo(self, todo_id: str) -> Todo | None:
        return self.store.get(todo_id)

    def create_todo(
        self,
        owner_id: str,
        *,
        title: str | None,
        category: str | None,
        description: str | None = None,
        priority: Priority | None = None,
        due_date: datetime | None = None,
    ) -> Todo:
        """Create a todo owned by ``owner_id``. New todos always start incomplete."""
        if not title or not category:
            raise ValidationError("Title and category are required")

        now = utcnow()
        todo = Todo(
            id=self.store.next_id(),
            title=title,
            description=description,
            category=category,
            completed=False,
            priority=priority,
            owner_id=owner_id,
            due_date=due_date,
            created_at=now,
            updated_at=now,
        )
        self.store.insert(todo)
        logger.info(f"Todo {todo.id} created by {owner_id}")
        return todo

    def update_todo(self, todo_id: str, changes: dict[str, Any], user_id: str) -> Todo:
        """Apply a partial update.

        Only keys present in ``changes`` are touched. Keys outside
        ``UPDATABLE_FIELDS`` (``owner_id``, ``id`` and so on) are ignored.

        Raises:
            NotFoundError: no todo with ``todo_id``.
            NotAuthorizedError: ``user_id`` does not own the todo.
            ValidationError: the patch empties the title or the category.
        """
        with self.store.locked():
            todo = authorize_owner(self.store.get(todo_id), user_id, "update")

            if any(changes.get(key) == "" for key in REQUIRED_TEXT_FIELDS):
                raise ValidationError("Title and category are required")

            patch = {
                key: value
                for key, value in changes.items()
                if key in UPDATABLE_FIELDS
                and not (value is None and key in NON_NULLABLE_FIELDS)
            }
            updated = dataclasses.replace(
                todo, **patch, updated_at=next_update_time(todo.updated_at)
            )
            self.store.replace(updated)

        logger.info(f"Todo {todo_id} updated by {user_id}: {sorted(patch)}")
        return updated

    def delete_todo(self, todo_id: str, user_id: str) -> None:
        """Remove a todo for good.

        Raises:
            NotFoundError: no todo with ``todo_id``.
            NotAuthorizedError: ``user_id`` does not own the todo.
        """
        with self.store.locked():
            authorize_owner(self.store.get(todo_id), user_id, "delete")
            self.store.remove(todo_id)

        logger.info(f"Todo {todo_id} deleted by {user_id}")
