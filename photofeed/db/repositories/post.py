"""Repository for post database operations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from photofeed.db.models import Post, PostImage

if TYPE_CHECKING:
    from collections.abc import Sequence


class PostRepository:
    """Repository for Post and PostImage models."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self._session = session

    async def create_post(
        self,
        *,
        author_id: int,
        caption: str | None,
        image_urls: list[str],
    ) -> Post:
        """Create a post with its images.

        Args:
            author_id: Owner of the post.
            caption: Optional caption.
            image_urls: Image URLs in display order.

        Returns:
            Created Post instance.
        """
        post = Post(
            author_id=author_id,
            caption=caption,
            images=[PostImage(url=url) for url in image_urls],
        )
        self._session.add(post)
        await self._session.flush()
        await self._session.refresh(post, attribute_names=["created_at", "updated_at"])
        return post

    async def get_post(self, post_id: int) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID to look up.

        Returns:
            Post if found, None otherwise.
        """
        return await self._session.get(Post, post_id)

    async def get_owner_id(self, resource_id: int) -> int | None:
        """Get the author of a post.

        Args:
            resource_id: Post ID.

        Returns:
            Author user id if the post exists, None otherwise.
        """
        result = await self._session.execute(
            select(Post.author_id).where(Post.id == resource_id)
        )
        return result.scalar_one_or_none()

    async def list_user_posts(self, author_id: int) -> Sequence[Post]:
        """List a user's posts, newest first.

        Args:
            author_id: Author to list posts for.

        Returns:
            List of Post instances.
        """
        result = await self._session.execute(
            select(Post).where(Post.author_id == author_id).order_by(Post.created_at.desc())
        )
        return result.scalars().all()

    async def update_post(
        self,
        post_id: int,
        *,
        caption: str | None = None,
        image_urls: list[str] | None = None,
    ) -> Post | None:
        """Update a post.

        A caption of None keeps the stored one. A non-empty ``image_urls``
        replaces all existing images.

        Args:
            post_id: Post ID to update.
            caption: New caption (optional).
            image_urls: Replacement image URLs (optional).

        Returns:
            Updated Post if found, None otherwise.
        """
        post = await self.get_post(post_id)
        if post is None:
            return None

        if caption is not None:
            post.caption = caption
        if image_urls:
            post.images = [PostImage(url=url) for url in image_urls]

        post.updated_at = datetime.now(timezone.utc)
        await self._session.flush()
        return post

    async def delete_post(self, post_id: int) -> bool:
        """Delete a post and its images.

        Args:
            post_id: Post ID to delete.

        Returns:
            True if deleted, False if not found.
        """
        post = await self.get_post(post_id)
        if post is None:
            return False

        await self._session.delete(post)
        await self._session.flush()
        return True
