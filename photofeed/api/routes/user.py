"""User profile API routes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

from litestar import Controller, delete, get, patch
from litestar.params import Body, Parameter
from litestar.status_codes import HTTP_200_OK

from photofeed.api.schemas.auth import MessageResponse
from photofeed.api.schemas.user import UpdateProfileRequest, UserProfileResponse
from photofeed.api.security import Identity, auth_guard
from photofeed.api.services import UserService


class UserController(Controller):
    """User profile endpoints."""

    path = "/users"
    tags: Sequence[str] | None = ["Users"]
    guards = [auth_guard]

    @get("/")
    async def list_users(
        self,
        user_service: UserService,
        limit: Annotated[int, Parameter(ge=1, le=100, default=50)] = 50,
        offset: Annotated[int, Parameter(ge=0, default=0)] = 0,
    ) -> list[UserProfileResponse]:
        """List users."""
        return await user_service.list_users(limit=limit, offset=offset)

    @get("/me/profile")
    async def get_my_profile(
        self,
        identity: Identity,
        user_service: UserService,
    ) -> UserProfileResponse:
        """Get current user's profile."""
        return await user_service.get_profile(identity.subject)

    @get("/{user_id:int}")
    async def get_profile(self, user_id: int, user_service: UserService) -> UserProfileResponse:
        """Get a user's profile."""
        return await user_service.get_profile(user_id)

    @patch("/{user_id:int}")
    async def update_profile(
        self,
        identity: Identity,
        user_id: int,
        data: Annotated[UpdateProfileRequest, Body()],
        user_service: UserService,
    ) -> UserProfileResponse:
        """Update own profile."""
        return await user_service.update_profile(
            identity,
            user_id,
            username=data.username,
            display_name=data.display_name,
            bio=data.bio,
            avatar_url=data.avatar_url,
        )

    @delete("/{user_id:int}", status_code=HTTP_200_OK)
    async def delete_account(
        self,
        identity: Identity,
        user_id: int,
        user_service: UserService,
    ) -> MessageResponse:
        """Delete own account.

        Issued session tokens keep working until they expire.
        """
        await user_service.delete_account(identity, user_id)
        return MessageResponse(message="Account deleted")
