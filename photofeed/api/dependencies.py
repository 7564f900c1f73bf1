"""Dependency injection providers for Litestar."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from dataclasses import dataclass

from litestar.datastructures import State
from litestar.di import Provide
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.api.security import (
    CookieConfig,
    JWTConfig,
    JWTService,
    PasswordConfig,
    PasswordService,
    get_identity,
)
from photofeed.api.services import AuthService, PostService, UserService
from photofeed.core.config import Settings
from photofeed.db import DatabaseManager
from photofeed.db.repositories import PostRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecurityComponents:
    """Process-wide security services, built once at startup."""

    jwt_service: JWTService
    password_service: PasswordService
    cookie_config: CookieConfig


def build_security(settings: Settings) -> SecurityComponents:
    """Build security services from settings.

    Args:
        settings: Application settings.

    Returns:
        SecurityComponents sharing one immutable configuration.

    Raises:
        ConfigurationError: If the signing secret is unusable in this environment.
    """
    settings.check_security()

    jwt_service = JWTService(
        JWTConfig(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            token_expire_days=settings.session_lifetime_days,
            issuer=settings.jwt_issuer,
        )
    )
    password_service = PasswordService(
        PasswordConfig(
            time_cost=settings.password_time_cost,
            memory_cost=settings.password_memory_cost,
            parallelism=settings.password_parallelism,
        )
    )
    # Cookie must expire together with the token it carries
    cookie_config = CookieConfig(
        name=settings.session_cookie_name,
        max_age=int(jwt_service.token_lifetime.total_seconds()),
        secure=settings.is_production,
    )

    return SecurityComponents(
        jwt_service=jwt_service,
        password_service=password_service,
        cookie_config=cookie_config,
    )


# -----------------------------------------------------------------------------
# Providers
# -----------------------------------------------------------------------------


async def provide_db_session(state: State) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for request scope.

    Yields:
        Database session that commits on success.
    """
    db_manager: DatabaseManager | None = state.get("db_manager")
    if db_manager is None:
        raise RuntimeError("Database not initialized")

    async with db_manager.session() as session:
        yield session


def provide_cookie_config(state: State) -> CookieConfig:
    """Provide session cookie configuration."""
    return state.get("cookie_config") or CookieConfig()


async def provide_auth_service(state: State, db_session: AsyncSession) -> AuthService:
    """Provide auth service for request scope.

    Args:
        state: Application state holding the security services.
        db_session: Database session.

    Returns:
        AuthService instance.
    """
    return AuthService(
        repository=UserRepository(db_session),
        jwt_service=state.jwt_service,
        password_service=state.password_service,
    )


async def provide_user_service(db_session: AsyncSession) -> UserService:
    """Provide user service for request scope."""
    return UserService(repository=UserRepository(db_session))


async def provide_post_service(db_session: AsyncSession) -> PostService:
    """Provide post service for request scope."""
    return PostService(repository=PostRepository(db_session))


# Dependency providers for Litestar
dependencies = {
    "db_session": Provide(provide_db_session),
    "cookie_config": Provide(provide_cookie_config, sync_to_thread=False),
    "identity": Provide(get_identity),
    "auth_service": Provide(provide_auth_service),
    "user_service": Provide(provide_user_service),
    "post_service": Provide(provide_post_service),
}
