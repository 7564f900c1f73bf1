"""User profile schemas using msgspec."""

from __future__ import annotations

from datetime import datetime

import msgspec


class UpdateProfileRequest(msgspec.Struct, kw_only=True):
    """Update user profile request.

    Only fields with a value are updated. A field that is omitted or sent as
    ``null`` keeps its stored value, so it cannot be cleared through this
    request.
    """

    username: str | None = None
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None


class UserProfileResponse(msgspec.Struct, kw_only=True):
    """User profile response."""

    id: int
    email: str
    username: str
    display_name: str | None
    bio: str | None
    avatar_url: str | None
    created_at: datetime
    updated_at: datetime
