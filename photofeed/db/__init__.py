"""Database module.

Provides async SQLAlchemy session management, models and repositories.
"""

from .models import Base, Post, PostImage, User
from .session import DatabaseManager

__all__ = [
    "Base",
    "DatabaseManager",
    "Post",
    "PostImage",
    "User",
]
