"""Pytest configuration and fixtures."""

import os

# Settings are read when src.main is imported
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.database import Database  # noqa: E402
from src.main import app  # noqa: E402
from src.services.auth import AuthService, TokenService  # noqa: E402
from src.services.todo_service import TodoService  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user info."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


def login_headers(client: TestClient, email: str, password: str) -> AuthHeaders:
    """Log in and return bearer headers for the user."""
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    data = response.json()["data"]
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture(scope="function")
def client():
    """Create a test client. Each client starts from freshly seeded state."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    """Register a user and return auth headers with user info."""
    response = client.post(
        "/api/auth/register",
        json={"email": "test@example.com", "password": "testpass123", "name": "Test User"},
    )
    assert response.status_code == 201
    return login_headers(client, "test@example.com", "testpass123")


@pytest.fixture
def demo_headers(client):
    """Auth headers for the seeded demo user that owns every demo todo."""
    return login_headers(client, "user1@example.com", "password123")


@pytest.fixture
def other_headers(client):
    """Auth headers for the second seeded demo user, who owns nothing."""
    return login_headers(client, "user2@example.com", "password456")


@pytest.fixture
def db():
    """Empty in-memory database for service-level tests."""
    return Database()


@pytest.fixture
def tokens():
    return TokenService("unit-test-secret")


@pytest.fixture
def auth_service(db, tokens):
    return AuthService(db.users, tokens)


@pytest.fixture
def todo_service(db):
    return TodoService(db.todos)
