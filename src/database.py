"""In-memory storage and store access for request handlers.

Each application instance owns one :class:`Database`, created in the FastAPI
lifespan and handed to routes through :func:`get_db`. Nothing here is durable:
state lives for the lifetime of the process.
"""

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from fastapi import Request

from src.models.todo import Todo
from src.models.user import User


class IdGenerator:
    """Issue ``<prefix>_<millis>`` ids that never repeat within this generator.

    Two calls in the same millisecond get consecutive values instead of
    colliding.
    """

    def __init__(self, prefix: str):
        self.prefix = prefix
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            value = max(time.time_ns() // 1_000_000, self._last + 1)
            self._last = value
        return f"{self.prefix}_{value}"


class UserStore:
    """Credential store. Insertion and lookup only; users are never updated or removed."""

    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = threading.RLock()
        self.next_id = IdGenerator("user")

    @contextmanager
    def locked(self) -> Iterator["UserStore"]:
        """Hold the store lock across a check-then-insert sequence."""
        with self._lock:
            yield self

    def find_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def find_by_email_or_name(self, email: str, name: str) -> User | None:
        """Return the first user whose email or name matches."""
        with self._lock:
            return next(
                (u for u in self._users.values() if u.email == email or u.name == name),
                None,
            )

    def insert(self, user: User) -> User:
        """Add a user. Uniqueness is the caller's job."""
        with self._lock:
            self._users[user.id] = user
        return user

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)


class TodoStore:
    """Todo collection kept in insertion order."""

    def __init__(self):
        self._todos: dict[str, Todo] = {}
        self._lock = threading.RLock()
        self.next_id = IdGenerator("todo")

    @contextmanager
    def locked(self) -> Iterator["TodoStore"]:
        """Hold the store lock across a read-check-write sequence."""
        with self._lock:
            yield self

    def all(self) -> list[Todo]:
        """Snapshot of every todo, oldest first."""
        with self._lock:
            return list(self._todos.values())

    def get(self, todo_id: str) -> Todo | None:
        with self._lock:
            return self._todos.get(todo_id)

    def insert(self, todo: Todo) -> Todo:
        with self._lock:
            self._todos[todo.id] = todo
        return todo

    def replace(self, todo: Todo) -> Todo:
        """Swap in a new version of an existing todo, keeping its position."""
        with self._lock:
            if todo.id not in self._todos:
                raise KeyError(todo.id)
            self._todos[todo.id] = todo
        return todo

    def remove(self, todo_id: str) -> None:
        with self._lock:
            del self._todos[todo_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)


@dataclass
class Database:
    """All stores belonging to one application instance."""

    users: UserStore = field(default_factory=UserStore)
    todos: TodoStore = field(default_factory=TodoStore)


def get_db(request: Request) -> Database:
    """Dependency that provides the application's stores."""
    return request.app.state.db
