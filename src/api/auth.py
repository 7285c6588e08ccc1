"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service, get_current_user
from src.models.user import User
from src.schemas.auth import LoginData, UserLogin, UserRegister, UserResponse
from src.schemas.common import DataResponse
from src.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=DataResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
def register(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth_service.register(user_data.email, user_data.name, user_data.password)
    return DataResponse(data=UserResponse.model_validate(user))


@router.post("/login", response_model=DataResponse[LoginData])
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    token, user = auth_service.login(credentials.email, credentials.password)
    return DataResponse(data=LoginData(user=UserResponse.model_validate(user), token=token))


@router.get("/me", response_model=DataResponse[UserResponse])
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return DataResponse(data=UserResponse.model_validate(current_user))
