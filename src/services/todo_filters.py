"""Query filters for listing todos.

Every filter is optional. Set filters are ANDed together and the surviving
todos keep their insertion order.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import UTC, date, datetime, time

from src.models.enums import Priority
from src.models.todo import Todo

END_OF_DAY = time(23, 59, 59, 999000)


def as_naive_utc(value: datetime) -> datetime:
    """Drop timezone info after converting to UTC, so naive and aware values compare."""
    if value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


@dataclass(frozen=True)
class TodoFilters:
    owner_id: str | None = None
    category: str | None = None
    completed: bool | None = None
    priority: Priority | None = None
    due_date: date | None = None
    search: str | None = None

    def predicates(self) -> list[Callable[[Todo], bool]]:
        """One predicate per filter that is set, in evaluation order."""
        checks: list[Callable[[Todo], bool]] = []

        if self.owner_id:
            checks.append(lambda todo: todo.owner_id == self.owner_id)

        if self.category:
            category = self.category.lower()
            checks.append(lambda todo: todo.category.lower() == category)

        # False is a real filter value here, only None means unset
        if self.completed is not None:
            checks.append(lambda todo: todo.completed is self.completed)

        if self.priority is not None:
            checks.append(lambda todo: todo.priority == self.priority)

        if self.due_date is not None:
            # Whole filter day is included whatever the todo's time of day
            cutoff = datetime.combine(self.due_date, END_OF_DAY)
            checks.append(
                lambda todo: todo.due_date is not None and as_naive_utc(todo.due_date) <= cutoff
            )

        if self.search:
            term = self.search.lower()
            checks.append(
                lambda todo: term in todo.title.lower()
                or (bool(todo.description) and term in todo.description.lower())
            )

        return checks


def apply_filters(todos: Iterable[Todo], filters: TodoFilters) -> list[Todo]:
    """Return the todos that pass every set filter."""
    checks = filters.predicates()
    return [todo for todo in todos if all(check(todo) for check in checks)]
