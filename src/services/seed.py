"""Demo data loaded into a fresh in-memory database at startup."""

import logging
from datetime import UTC, datetime

from src.database import Database
from src.models.enums import Priority
from src.models.todo import Todo
from src.models.user import User
from src.services.auth import get_password_hash

logger = logging.getLogger(__name__)

# Demo user credentials: (id, email, name, password)
DEMO_USERS = [
    ("user_1", "user1@example.com", "User One", "password123"),
    ("user_2", "user2@example.com", "User Two", "password456"),
]

DEMO_CREATED_AT = datetime(2024, 8, 30, tzinfo=UTC)


def _demo_todos() -> list[Todo]:
    return [
        Todo(
            id="todo_1",
            title="Complete backend API",
            description="Build the todo CRUD API with authentication",
            category="work",
            completed=False,
            priority=Priority.HIGH,
            owner_id="user_1",
            due_date=datetime(2024, 9, 1, tzinfo=UTC),
            created_at=DEMO_CREATED_AT,
            updated_at=DEMO_CREATED_AT,
        ),
        Todo(
            id="todo_2",
            title="Buy groceries",
            description="Milk, bread, eggs, vegetables",
            category="personal",
            completed=True,
            priority=Priority.MEDIUM,
            owner_id="user_1",
            due_date=datetime(2024, 9, 2, tzinfo=UTC),
            created_at=DEMO_CREATED_AT,
            updated_at=DEMO_CREATED_AT,
        ),
        Todo(
            id="todo_3",
            title="Plan weekend trip",
            description="Research destinations and book accommodation",
            category="personal",
            completed=False,
            priority=Priority.LOW,
            owner_id="user_1",
            due_date=datetime(2024, 9, 5, tzinfo=UTC),
            created_at=DEMO_CREATED_AT,
            updated_at=DEMO_CREATED_AT,
        ),
    ]


def seed_demo_data(db: Database) -> None:
    """Populate ``db`` with the demo users and their todos."""
    for user_id, email, name, password in DEMO_USERS:
        db.users.insert(
            User(id=user_id, email=email, name=name, password_hash=get_password_hash(password))
        )
        logger.info(f"Demo user created: {email}")

    todos = _demo_todos()
    for todo in todos:
        db.todos.insert(todo)
    logger.info(f"{len(todos)} demo todos initialized for user_1")
