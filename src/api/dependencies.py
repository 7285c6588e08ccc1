"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.database import Database, get_db
from src.models.user import User
from src.services.auth import AuthService, TokenService
from src.services.todo_service import TodoService

# Missing or non-bearer headers come through as None so the service picks the message
security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    """Get the application's token service."""
    return request.app.state.tokens


def get_auth_service(
    db: Annotated[Database, Depends(get_db)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db.users, tokens)


def get_todo_service(
    db: Annotated[Database, Depends(get_db)],
) -> TodoService:
    """Get todo service with dependencies."""
    return TodoService(db.todos)


def get_current_user(
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> User:
    """Get the current authenticated user from the bearer token."""
    # Rebuilt so the service sees the scheme exactly as the client sent it
    header = f"{credentials.scheme} {credentials.credentials}" if credentials else None
    return auth_service.authenticate(header)
