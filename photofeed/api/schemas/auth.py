"""Authentication schemas using msgspec."""

from __future__ import annotations

from datetime import datetime

import msgspec

# -----------------------------------------------------------------------------
# Request schemas
# -----------------------------------------------------------------------------


class SignUpRequest(msgspec.Struct, kw_only=True):
    """User registration request."""

    email: str
    password: str
    username: str
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


class SignInRequest(msgspec.Struct, kw_only=True):
    """User login request."""

    email: str
    password: str


# -----------------------------------------------------------------------------
# Response schemas
# -----------------------------------------------------------------------------


class IdentityResponse(msgspec.Struct, kw_only=True):
    """Authenticated identity."""

    id: int
    email: str


class SignUpResponse(msgspec.Struct, kw_only=True):
    """Public fields of a newly registered user."""

    id: int
    email: str
    username: str
    display_name: str | None
    created_at: datetime


class SignInResponse(msgspec.Struct, kw_only=True):
    """Login response; the token itself travels in the session cookie."""

    identity: IdentityResponse
    message: str


class WhoAmIResponse(msgspec.Struct, kw_only=True, rename="camel"):
    """Current session info."""

    logged_in: bool
    identity: IdentityResponse


class MessageResponse(msgspec.Struct, kw_only=True):
    """Simple message response."""

    message: str


class ErrorResponse(msgspec.Struct, kw_only=True):
    """Error response with a stable machine-readable kind."""

    error: str
    error_description: str | None = None
