"""Repository for user-related database operations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.core.exceptions import (
    DuplicateCredentialError,
    DuplicateUsernameError,
    PhotofeedError,
)
from photofeed.db.models import User

if TYPE_CHECKING:
    from collections.abc import Sequence

# Names the username unique constraint goes by in driver error messages
# (SQLite reports the column, PostgreSQL the constraint).
USERNAME_CONSTRAINTS = ("users.username", "users_username_key")


def conflict_from_integrity_error(error: IntegrityError) -> PhotofeedError:
    """Map a uniqueness violation on the users table to an application error.

    Only the first line of the driver message is inspected; later lines
    may echo the offending value.

    Args:
        error: Error raised by the flush.

    Returns:
        DuplicateUsernameError for the username constraint,
        DuplicateCredentialError otherwise.
    """
    lines = str(error.orig).splitlines()
    summary = lines[0] if lines else ""
    if any(name in summary for name in USERNAME_CONSTRAINTS):
        return DuplicateUsernameError(cause=error)
    return DuplicateCredentialError(cause=error)


class UserRepository:
    """Repository for user database operations.

    Implements the credential store used by sign-up and sign-in, and the
    owner lookup for user records. All methods are async and use the
    provided session for transaction management.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self._session = session

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
        """Create a new user.

        Args:
            email: User email (must be unique).
            password_hash: Encoded password hash.
            username: Unique handle.
            display_name: Optional display name.
            bio: Optional biography.
            avatar_url: Optional avatar image URL.

        Returns:
            Created User instance.

        Raises:
            DuplicateCredentialError: If the email is taken.
            DuplicateUsernameError: If the username is taken.
        """
        user = User(
            email=email.lower(),
            password_hash=password_hash,
            username=username,
            display_name=display_name,
            bio=bio,
            avatar_url=avatar_url,
        )
        self._session.add(user)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise conflict_from_integrity_error(e) from e
        await self._session.refresh(user)
        return user

    async def get_user(self, user_id: int) -> User | None:
        """Get user by ID.

        Args:
            user_id: User ID.

        Returns:
            User if found, None otherwise.
        """
        return await self._session.get(User, user_id)

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email.

        Args:
            email: User email.

        Returns:
            User if found, None otherwise.
        """
        result = await self._session.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def get_user_by_username(self, username: str) -> User | None:
        """Get user by username.

        Args:
            username: Handle to look up.

        Returns:
            User if found, None otherwise.
        """
        result = await self._session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def list_users(self, *, limit: int = 50, offset: int = 0) -> Sequence[User]:
        """List users in registration order.

        Args:
            limit: Maximum number of users to return.
            offset: Number of users to skip.

        Returns:
            Users ordered by id.
        """
        result = await self._session.execute(
            select(User).order_by(User.id).limit(limit).offset(offset)
        )
        return result.scalars().all()

    async def get_owner_id(self, resource_id: int) -> int | None:
        """A user record is owned by the user itself."""
        result = await self._session.execute(select(User.id).where(User.id == resource_id))
        return result.scalar_one_or_none()

    async def update_user(
        self,
        user_id: int,
        *,
        username: str | None = None,
        display_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> User | None:
        """Update profile fields.

        Arguments left as None keep their stored value.

        Args:
            user_id: User ID to update.
            username: New username (optional).
            display_name: New display name (optional).
            bio: New biography (optional).
            avatar_url: New avatar URL (optional).

        Returns:
            Updated User if found, None otherwise.

        Raises:
            DuplicateUsernameError: If the new username is taken.
        """
        user = await self.get_user(user_id)
        if user is None:
            return None

        if username is not None:
            user.username = username
        if display_name is not None:
            user.display_name = display_name
        if bio is not None:
            user.bio = bio
        if avatar_url is not None:
            user.avatar_url = avatar_url

        user.updated_at = datetime.now(timezone.utc)
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise conflict_from_integrity_error(e) from e
        return user

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user and, by cascade, their posts.

        Args:
            user_id: User ID to delete.

        Returns:
            True if deleted, False if not found.
        """
        user = await self.get_user(user_id)
        if user is None:
            return False

        await self._session.delete(user)
        await self._session.flush()
        return True
