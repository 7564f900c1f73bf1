"""Database repositories module."""

from .base import CredentialStore, OwnedResourceStore
from .post import PostRepository
from .user import UserRepository

__all__ = [
    "CredentialStore",
    "OwnedResourceStore",
    "PostRepository",
    "UserRepository",
]
