"""Post and post image database models."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photofeed.db.models.base import Base

if TYPE_CHECKING:
    from photofeed.db.models.user import User


class Post(Base):
    """A user's post: a caption plus one or more images."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    caption: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Relationships
    author: Mapped[User] = relationship("User", back_populates="posts")
    images: Mapped[list[PostImage]] = relationship(
        "PostImage",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostImage.id",
        lazy="selectin",
    )

    __table_args__ = (Index("ix_posts_author_created", "author_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<Post {self.id} author={self.author_id}>"


class PostImage(Base):
    """Image attached to a post."""

    __tablename__ = "post_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    url: Mapped[str] = mapped_column(String(1024), nullable=False)

    post: Mapped[Post] = relationship("Post", back_populates="images")

    def __repr__(self) -> str:
        return f"<PostImage {self.id} post={self.post_id}>"
