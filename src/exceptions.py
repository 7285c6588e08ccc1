"""Domain errors raised by services and mapped to HTTP responses in ``src.main``."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that carry a client-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Required fields are missing from a request."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    """Caller could not be authenticated (bad token, unknown user, bad credentials)."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotAuthorizedError(AppError):
    """Caller is authenticated but does not own the record."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    """No record with the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Record collides with an existing one."""

    status_code = status.HTTP_409_CONFLICT
