"""Ownership policy for todo mutations."""

import logging

from src.exceptions import NotAuthorizedError, NotFoundError
from src.models.todo import Todo

logger = logging.getLogger(__name__)


def authorize_owner(todo: Todo | None, user_id: str, action: str) -> Todo:
    """Allow ``action`` on ``todo`` only for its owner.

    Existence is checked first, so a missing todo is reported as not found
    whoever asks.
    """
    if todo is None:
        raise NotFoundError("Todo not found")
    if todo.owner_id != user_id:
        logger.info(f"User {user_id} denied {action} on {todo.id} (owner {todo.owner_id})")
        raise NotAuthorizedError(f"Not authorized to {action} this todo")
    return todo
