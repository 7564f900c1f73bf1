"""API routes module."""

from .auth import AuthController
from .errors import error_response, photofeed_error_handler
from .health import health
from .post import PostController
from .user import UserController

__all__ = [
    "AuthController",
    "PostController",
    "UserController",
    "error_response",
    "health",
    "photofeed_error_handler",
]
