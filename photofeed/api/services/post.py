"""Post service with ownership enforcement."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from photofeed.api.schemas.post import PostResponse
from photofeed.api.security import Identity, ensure_owner
from photofeed.core.exceptions import ResourceNotFoundError
from photofeed.db.repositories import PostRepository

if TYPE_CHECKING:
    from photofeed.db.models import Post

logger = logging.getLogger(__name__)


class PostService:
    """Post management.

    Updates and deletes look the post up first, then check that the caller
    authored it, and only then write.
    """

    def __init__(self, repository: PostRepository) -> None:
        self._repo = repository

    async def create_post(
        self,
        identity: Identity,
        *,
        caption: str | None,
        images: list[str],
    ) -> PostResponse:
        """Create a post owned by the caller."""
        post = await self._repo.create_post(
            author_id=identity.subject,
            caption=caption,
            image_urls=images,
        )
        logger.info(f"Post {post.id} created by user {identity.subject}")
        return self._to_response(post)

    async def get_post(self, post_id: int) -> PostResponse:
        """Get a post.

        Raises:
            ResourceNotFoundError: If post not found.
        """
        post = await self._repo.get_post(post_id)
        if post is None:
            raise ResourceNotFoundError("Post not found")
        return self._to_response(post)

    async def list_user_posts(self, author_id: int) -> list[PostResponse]:
        """List a user's posts, newest first."""
        posts = await self._repo.list_user_posts(author_id)
        return [self._to_response(post) for post in posts]

    async def update_post(
        self,
        identity: Identity,
        post_id: int,
        *,
        caption: str | None = None,
        images: list[str] | None = None,
    ) -> PostResponse:
        """Update a post authored by the caller.

        Args:
            identity: Authenticated caller.
            post_id: Post ID.
            caption: New caption (optional).
            images: Replacement image URLs (optional).

        Returns:
            Updated PostResponse.

        Raises:
            ResourceNotFoundError: If post not found.
            OwnershipViolationError: If the caller is not the author.
        """
        ensure_owner(identity, await self._repo.get_owner_id(post_id), resource="Post")

        post = await self._repo.update_post(post_id, caption=caption, image_urls=images)
        if post is None:
            raise ResourceNotFoundError("Post not found")

        return self._to_response(post)

    async def delete_post(self, identity: Identity, post_id: int) -> None:
        """Delete a post authored by the caller.

        Raises:
            ResourceNotFoundError: If post not found.
            OwnershipViolationError: If the caller is not the author.
        """
        ensure_owner(identity, await self._repo.get_owner_id(post_id), resource="Post")

        await self._repo.delete_post(post_id)
        logger.info(f"Post {post_id} deleted by user {identity.subject}")

    def _to_response(self, post: Post) -> PostResponse:
        return PostResponse(
            id=post.id,
            author_id=post.author_id,
            caption=post.caption,
            images=[image.url for image in post.images],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
