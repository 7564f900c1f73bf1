"""User profile service for account management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from photofeed.api.schemas.user import UserProfileResponse
from photofeed.api.security import Identity, ensure_owner
from photofeed.core.exceptions import DuplicateUsernameError, ResourceNotFoundError
from photofeed.db.repositories import UserRepository

if TYPE_CHECKING:
    from photofeed.db.models import User

logger = logging.getLogger(__name__)


class UserService:
    """User profile management service.

    Profile changes are only allowed on the caller's own account.
    """

    def __init__(self, repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            repository: User repository.
        """
        self._repo = repository

    async def list_users(self, *, limit: int = 50, offset: int = 0) -> list[UserProfileResponse]:
        """List user profiles in registration order."""
        users = await self._repo.list_users(limit=limit, offset=offset)
        return [self._to_profile_response(user) for user in users]

    async def get_profile(self, user_id: int) -> UserProfileResponse:
        """Get user profile.

        Args:
            user_id: User ID.

        Returns:
            UserProfileResponse.

        Raises:
            ResourceNotFoundError: If user not found.
        """
        user = await self._repo.get_user(user_id)
        if user is None:
            raise ResourceNotFoundError("User not found")

        return self._to_profile_response(user)

    async def update_profile(
        self,
        identity: Identity,
        user_id: int,
        *,
        username: str | None = None,
        display_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> UserProfileResponse:
        """Update a user profile.

        Args:
            identity: Authenticated caller.
            user_id: User ID to update.
            username: New username (optional).
            display_name: New display name (optional).
            bio: New biography (optional).
            avatar_url: New avatar URL (optional).

        Returns:
            Updated UserProfileResponse.

        Raises:
            ResourceNotFoundError: If user not found.
            OwnershipViolationError: If the caller is not that user.
            DuplicateUsernameError: If the new username belongs to someone else.
        """
        ensure_owner(identity, await self._repo.get_owner_id(user_id), resource="User")

        if username is not None:
            holder = await self._repo.get_user_by_username(username)
            if holder is not None and holder.id != user_id:
                raise DuplicateUsernameError()

        user = await self._repo.update_user(
            user_id,
            username=username,
            display_name=display_name,
            bio=bio,
            avatar_url=avatar_url,
        )
        if user is None:
            raise ResourceNotFoundError("User not found")

        logger.info(f"Profile updated for user {user_id}")

        return self._to_profile_response(user)

    async def delete_account(self, identity: Identity, user_id: int) -> None:
        """Delete a user account.

        Existing session tokens stay valid until they expire.

        Args:
            identity: Authenticated caller.
            user_id: User ID to delete.

        Raises:
            ResourceNotFoundError: If user not found.
            OwnershipViolationError: If the caller is not that user.
        """
        ensure_owner(identity, await self._repo.get_owner_id(user_id), resource="User")

        await self._repo.delete_user(user_id)
        logger.info(f"Account deleted for user {user_id}")

    def _to_profile_response(self, user: User) -> UserProfileResponse:
        """Convert User model to profile response.

        Args:
            user: User model.

        Returns:
            UserProfileResponse.
        """
        return UserProfileResponse(
            id=user.id,
            email=user.email,
            username=user.username,
            display_name=user.display_name,
            bio=user.bio,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
