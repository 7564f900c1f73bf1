"""API services module."""

from .auth import AuthService, SignInResult
from .post import PostService
from .user import UserService

__all__ = [
    "AuthService",
    "PostService",
    "SignInResult",
    "UserService",
]
