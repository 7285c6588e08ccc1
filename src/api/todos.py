"""Todo API endpoints."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from src.api.dependencies import get_current_user, get_todo_service
from src.exceptions import NotFoundError, ValidationError
from src.models.enums import Priority
from src.models.user import User
from src.schemas.common import DataResponse, MessageDataResponse, MessageResponse
from src.schemas.todo import TodoCreate, TodoListResponse, TodoResponse, TodoUpdate
from src.services.todo_filters import TodoFilters
from src.services.todo_service import TodoService

router = APIRouter(prefix="/todos", tags=["todos"])


def _parse_filter(value: str | None, parse):
    """Parse a query value, treating an empty one as absent."""
    if not value:
        return None
    try:
        return parse(value)
    except ValueError:
        raise ValidationError("Invalid request") from None


@router.get("", response_model=TodoListResponse)
def get_todos(
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
    owner_id: Annotated[str | None, Query(alias="ownerId")] = None,
    category: str | None = None,
    completed: Annotated[str | None, Query(description="'true' for completed todos")] = None,
    priority: Annotated[str | None, Query(description="low, medium or high")] = None,
    search: str | None = None,
    due_date: Annotated[
        str | None, Query(alias="dueDate", description="Todos due on or before this day")
    ] = None,
):
    """List todos, optionally filtered. Empty filter values are ignored.

    No authentication required.
    """
    filters = TodoFilters(
        owner_id=owner_id,
        category=category,
        completed=None if not completed else completed == "true",
        priority=_parse_filter(priority, Priority),
        due_date=_parse_filter(due_date, date.fromisoformat),
        search=search,
    )
    todos = [TodoResponse.model_validate(todo) for todo in todo_service.list_todos(filters)]
    return TodoListResponse(data=todos, count=len(todos))


@router.get("/{todo_id}", response_model=DataResponse[TodoResponse])
def get_todo(
    todo_id: str,
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Get a single todo. No authentication required."""
    todo = todo_service.get_todo(todo_id)
    if todo is None:
        raise NotFoundError("Todo not found")
    return DataResponse(data=TodoResponse.model_validate(todo))


@router.post(
    "",
    response_model=MessageDataResponse[TodoResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_todo(
    todo_data: TodoCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Create a todo owned by the caller."""
    todo = todo_service.create_todo(
        current_user.id,
        title=todo_data.title,
        category=todo_data.category,
        description=todo_data.description,
        priority=todo_data.priority,
        due_date=todo_data.due_date,
    )
    return MessageDataResponse(
        message="Todo created successfully", data=TodoResponse.model_validate(todo)
    )


@router.patch("/{todo_id}", response_model=MessageDataResponse[TodoResponse])
def update_todo(
    todo_id: str,
    todo_data: TodoUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Update the fields sent in the body. Only the owner may update."""
    todo = todo_service.update_todo(
        todo_id, todo_data.model_dump(exclude_unset=True), current_user.id
    )
    return MessageDataResponse(
        message="Todo updated successfully", data=TodoResponse.model_validate(todo)
    )


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    todo_service: Annotated[TodoService, Depends(get_todo_service)],
):
    """Delete a todo. Only the owner may delete."""
    todo_service.delete_todo(todo_id, current_user.id)
    return MessageResponse(message="Todo deleted successfully")
