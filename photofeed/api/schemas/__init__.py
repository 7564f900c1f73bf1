"""API schemas module."""

from .auth import (
    ErrorResponse,
    IdentityResponse,
    MessageResponse,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
    WhoAmIResponse,
)
from .post import CreatePostRequest, PostResponse, UpdatePostRequest
from .user import UpdateProfileRequest, UserProfileResponse

__all__ = [
    "CreatePostRequest",
    "ErrorResponse",
    "IdentityResponse",
    "MessageResponse",
    "PostResponse",
    "SignInRequest",
    "SignInResponse",
    "SignUpRequest",
    "SignUpResponse",
    "UpdatePostRequest",
    "UpdateProfileRequest",
    "UserProfileResponse",
    "WhoAmIResponse",
]
