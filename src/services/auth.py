"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import Settings, get_settings
from src.database import UserStore
from src.exceptions import AuthenticationError, ConflictError, ValidationError
from src.models.user import User

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@lru_cache
def get_password_context() -> CryptContext:
    """Password hashing context, bcrypt at the configured cost factor."""
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return get_password_context().verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return get_password_context().hash(password)


class TokenService:
    """Issue and check signed, time-limited bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", lifetime: timedelta = timedelta(hours=12)):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            lifetime=timedelta(hours=settings.jwt_expiration_hours),
        )

    def issue(self, claims: dict[str, Any]) -> str:
        """Sign ``claims`` with issued-at and expiry stamped in."""
        issued_at = datetime.now(UTC)
        to_encode = {
            **claims,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def issue_for(self, user: User) -> str:
        return self.issue({"sub": user.id, "email": user.email, "name": user.name})

    def verify(self, token: str) -> dict[str, Any] | None:
        """Decode and validate a token.

        Returns the claims, or None for any failure. The reason is logged and
        never handed back to the caller.
        """
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification failed: {e}")
            return None

    @staticmethod
    def extract_from_header(header: str | None) -> str:
        """Pull the token out of an ``Authorization: Bearer <token>`` value."""
        if not header or not header.startswith(BEARER_PREFIX):
            raise AuthenticationError("Access token required")
        token = header[len(BEARER_PREFIX) :]
        if not token:
            raise AuthenticationError("Access token required")
        return token


class AuthService:
    """Registration, login and caller resolution over the credential store."""

    def __init__(self, users: UserStore, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    def register(self, email: str | None, name: str | None, password: str | None) -> User:
        """Create a user.

        Raises:
            ValidationError: a field is missing or empty.
            ConflictError: the email or the name is already taken.
        """
        if not email or not name or not password:
            raise ValidationError("Email, name and password are required")

        # Hash outside the lock, it is the slow part
        password_hash = get_password_hash(password)

        with self.users.locked():
            if self.users.find_by_email_or_name(email, name):
                logger.info(f"Registration rejected, user exists: {email}")
                raise ConflictError("User already exists")

            user = User(
                id=self.users.next_id(),
                email=email,
                name=name,
                password_hash=password_hash,
            )
            self.users.insert(user)
        logger.info(f"Registered user {user.id} ({user.email})")
        return user

    def login(self, email: str | None, password: str | None) -> tuple[str, User]:
        """Check credentials and issue a token.

        Unknown email and wrong password are reported separately.
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = self.users.find_by_email(email)
        if user is None:
            logger.info(f"Login failed, unknown email: {email}")
            raise AuthenticationError("User not found")

        if not verify_password(password, user.password_hash):
            logger.info(f"Login failed, bad password for {user.id}")
            raise AuthenticationError("Invalid password")

        logger.info(f"Login: {user.name} ({user.id})")
        return self.tokens.issue_for(user), user

    def resolve_caller(self, user_id: str) -> User | None:
        return self.users.find_by_id(user_id)

    def authenticate(self, authorization: str | None) -> User:
        """Turn an ``Authorization`` header into the calling user.

        Raises:
            AuthenticationError: missing token, invalid or expired token, or
                a token whose subject no longer exists.
        """
        token = self.tokens.extract_from_header(authorization)

        payload = self.tokens.verify(token)
        if payload is None or not payload.get("sub"):
            raise AuthenticationError("Invalid or expired token")

        user = self.resolve_caller(payload["sub"])
        if user is None:
            raise AuthenticationError("User not found")
        return user
