"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import LoginData, UserLogin, UserRegister, UserResponse
from src.schemas.common import (
    DataResponse,
    MessageDataResponse,
    MessageResponse,
)
from src.schemas.todo import TodoCreate, TodoListResponse, TodoResponse, TodoUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "LoginData",
    "DataResponse",
    "MessageResponse",
    "MessageDataResponse",
    "TodoCreate",
    "TodoUpdate",
    "TodoResponse",
    "TodoListResponse",
]
