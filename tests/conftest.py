"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from photofeed.api.security import (
    CookieConfig,
    Identity,
    JWTConfig,
    JWTService,
    PasswordConfig,
    PasswordService,
)
from photofeed.api.services import AuthService, PostService, UserService
from photofeed.core.exceptions import DuplicateCredentialError, DuplicateUsernameError
from photofeed.db.models import Post, PostImage, User
from photofeed.db.repositories import PostRepository, UserRepository

# Cheap Argon2 parameters keep the suite fast; the encoding is unchanged.
TEST_PASSWORD_CONFIG = PasswordConfig(time_cost=1, memory_cost=1024, parallelism=1)


class InMemoryUserStore:
    """Credential store backed by a dict, enforcing email and username uniqueness."""

    def __init__(self) -> None:
        self.users: dict[int, User] = {}
        self.create_calls = 0

    async def get_user_by_email(self, email: str) -> User | None:
        return next((u for u in self.users.values() if u.email == email.lower()), None)

    async def get_user_by_username(self, username: str) -> User | None:
        return next((u for u in self.users.values() if u.username == username), None)

    async def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        username: str,
        display_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        self.create_calls += 1
        if any(u.email == email.lower() for u in self.users.values()):
            raise DuplicateCredentialError()
        if any(u.username == username for u in self.users.values()):
            raise DuplicateUsernameError()

        now = datetime.now(timezone.utc)
        user = User(
            id=len(self.users) + 1,
            email=email.lower(),
            password_hash=password_hash,
            username=username,
            display_name=display_name,
            bio=bio,
            avatar_url=avatar_url,
            created_at=now,
            updated_at=now,
        )
        self.users[user.id] = user
        return user


@pytest.fixture
def password_service() -> PasswordService:
    """Create password service for testing."""
    return PasswordService(TEST_PASSWORD_CONFIG)


@pytest.fixture
def jwt_config() -> JWTConfig:
    """Create JWT config for testing."""
    return JWTConfig(
        secret_key="test_secret_key_for_testing_only_256bits",
        token_expire_days=7,
        issuer="photofeed-test",
    )


@pytest.fixture
def jwt_service(jwt_config: JWTConfig) -> JWTService:
    """Create JWT service for testing."""
    return JWTService(jwt_config)


@pytest.fixture
def cookie_config() -> CookieConfig:
    """Cookie config usable over the plain-HTTP test client."""
    return CookieConfig(secure=False)


@pytest.fixture
def mock_user_repository() -> AsyncMock:
    """Create mock user repository with empty lookups."""
    repository = AsyncMock(spec=UserRepository)
    repository.get_user_by_email.return_value = None
    repository.get_user_by_username.return_value = None
    return repository


@pytest.fixture
def mock_post_repository() -> AsyncMock:
    """Create mock post repository."""
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def user_store() -> InMemoryUserStore:
    """Create an in-memory credential store."""
    return InMemoryUserStore()


@pytest.fixture
def auth_service(
    mock_user_repository: AsyncMock,
    jwt_service: JWTService,
    password_service: PasswordService,
) -> AuthService:
    """Create auth service with mocked repository."""
    return AuthService(
        repository=mock_user_repository,
        jwt_service=jwt_service,
        password_service=password_service,
    )


@pytest.fixture
def user_service(mock_user_repository: AsyncMock) -> UserService:
    """Create user service with mocked repository."""
    return UserService(repository=mock_user_repository)


@pytest.fixture
def post_service(mock_post_repository: AsyncMock) -> PostService:
    """Create post service with mocked repository."""
    return PostService(repository=mock_post_repository)


@pytest.fixture
def owner() -> Identity:
    """Identity owning the resources in tests."""
    return Identity(subject=5, email="owner@example.com")


@pytest.fixture
def intruder() -> Identity:
    """Identity that owns nothing."""
    return Identity(subject=6, email="intruder@example.com")


@pytest.fixture
def mock_user(password_service: PasswordService) -> MagicMock:
    """Create a mock user for testing."""
    now = datetime.now(timezone.utc)
    user = MagicMock(spec=User)
    user.id = 5
    user.email = "test@example.com"
    user.username = "tester"
    user.display_name = "Test User"
    user.bio = None
    user.avatar_url = None
    user.created_at = now
    user.updated_at = now
    user.password_hash = password_service.hash("test_password")
    return user


@pytest.fixture
def mock_post() -> MagicMock:
    """Create a mock post owned by user 5."""
    now = datetime.now(timezone.utc)
    image = MagicMock(spec=PostImage)
    image.url = "https://cdn.example.com/1.jpg"
    post = MagicMock(spec=Post)
    post.id = 10
    post.author_id = 5
    post.caption = "sunset"
    post.images = [image]
    post.created_at = now
    post.updated_at = now
    return post
