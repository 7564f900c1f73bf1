"""Database models module."""

from .base import Base
from .post import Post, PostImage
from .user import User

__all__ = [
    "Base",
    "Post",
    "PostImage",
    "User",
]
