"""Authentication service for sign-up and sign-in."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from anyio import to_thread

from photofeed.api.schemas.auth import SignUpResponse
from photofeed.api.security import Identity, JWTService, PasswordService
from photofeed.core.exceptions import (
    DuplicateCredentialError,
    DuplicateUsernameError,
    InvalidCredentialsError,
)
from photofeed.db.repositories import CredentialStore

if TYPE_CHECKING:
    from photofeed.db.models import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignInResult:
    """Outcome of a successful sign-in."""

    identity: Identity
    access_token: str
    expires_at: datetime


class AuthService:
    """Authentication service.

    Handles registration and login. Sessions are stateless signed tokens,
    so sign-out needs nothing from this service; the transport simply
    drops the cookie.
    """

    def __init__(
        self,
        repository: CredentialStore,
        jwt_service: JWTService,
        password_service: PasswordService,
    ) -> None:
        """Initialize auth service.

        Args:
            repository: Credential store.
            jwt_service: Session token service.
            password_service: Password hashing service.
        """
        self._repo = repository
        self._jwt = jwt_service
        self._password = password_service

    async def sign_up(
        self,
        *,
        email: str,
        password: str,
        username: str,
        display_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> SignUpResponse:
        """Register a new user.

        Args:
            email: User email.
            password: Plain text password.
            username: Unique handle.
            display_name: Optional display name.
            bio: Optional biography.
            avatar_url: Optional avatar URL.

        Returns:
            Public fields of the created user.

        Raises:
            DuplicateCredentialError: If email is taken.
            DuplicateUsernameError: If username is taken.
        """
        if await self._repo.get_user_by_email(email) is not None:
            raise DuplicateCredentialError()
        if await self._repo.get_user_by_username(username) is not None:
            raise DuplicateUsernameError()

        # Key derivation is slow on purpose; keep it off the event loop
        password_hash = await to_thread.run_sync(self._password.hash, password)

        user = await self._repo.create_user(
            email=email,
            password_hash=password_hash,
            username=username,
            display_name=display_name,
            bio=bio,
            avatar_url=avatar_url,
        )

        logger.info(f"User registered: {user.id}")

        return self._to_public(user)

    async def sign_in(self, *, email: str, password: str) -> SignInResult:
        """Authenticate user and issue a session token.

        Args:
            email: User email.
            password: Plain text password.

        Returns:
            SignInResult with the identity and its token.

        Raises:
            InvalidCredentialsError: If email or password is wrong.
        """
        user = await self._repo.get_user_by_email(email)

        if user is None:
            # Prevent timing attacks
            await to_thread.run_sync(self._password.hash, password)
            logger.info("Sign-in rejected: unknown email")
            raise InvalidCredentialsError()

        if not await to_thread.run_sync(self._password.verify, password, user.password_hash):
            logger.info(f"Sign-in rejected: wrong password for user {user.id}")
            raise InvalidCredentialsError()

        token, expires_at = self._jwt.issue(user.id, user.email)

        logger.info(f"User signed in: {user.id}")

        return SignInResult(
            identity=Identity(subject=user.id, email=user.email),
            access_token=token,
            expires_at=expires_at,
        )

    def _to_public(self, user: User) -> SignUpResponse:
        return SignUpResponse(
            id=user.id,
            email=user.email,
            username=user.username,
            display_name=user.display_name,
            created_at=user.created_at,
        )
