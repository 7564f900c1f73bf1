"""Post API routes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated

from litestar import Controller, delete, get, patch, post
from litestar.params import Body
from litestar.status_codes import HTTP_201_CREATED

from photofeed.api.schemas.auth import MessageResponse
from photofeed.api.schemas.post import CreatePostRequest, PostResponse, UpdatePostRequest
from photofeed.api.security import Identity, auth_guard
from photofeed.api.services import PostService


class PostController(Controller):
    """Post endpoints.

    Reading a single post is public; everything else requires a session.
    """

    path = "/posts"
    tags: Sequence[str] | None = ["Posts"]

    @post("/", guards=[auth_guard], status_code=HTTP_201_CREATED)
    async def create_post(
        self,
        identity: Identity,
        data: Annotated[CreatePostRequest, Body()],
        post_service: PostService,
    ) -> PostResponse:
        """Create a post owned by the caller."""
        return await post_service.create_post(
            identity,
            caption=data.caption,
            images=data.images,
        )

    @get("/user/{user_id:int}", guards=[auth_guard])
    async def list_user_posts(
        self,
        user_id: int,
        post_service: PostService,
    ) -> list[PostResponse]:
        """List a user's posts."""
        return await post_service.list_user_posts(user_id)

    @get("/{post_id:int}")
    async def get_post(self, post_id: int, post_service: PostService) -> PostResponse:
        """Get a single post."""
        return await post_service.get_post(post_id)

    @patch("/{post_id:int}", guards=[auth_guard])
    async def update_post(
        self,
        identity: Identity,
        post_id: int,
        data: Annotated[UpdatePostRequest, Body()],
        post_service: PostService,
    ) -> PostResponse:
        """Update a post authored by the caller."""
        return await post_service.update_post(
            identity,
            post_id,
            caption=data.caption,
            images=data.images,
        )

    @delete("/{post_id:int}", guards=[auth_guard], status_code=200)
    async def delete_post(
        self,
        identity: Identity,
        post_id: int,
        post_service: PostService,
    ) -> MessageResponse:
        """Delete a post authored by the caller."""
        await post_service.delete_post(identity, post_id)
        return MessageResponse(message="Post deleted")
