"""Post schemas using msgspec."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

import msgspec


class CreatePostRequest(msgspec.Struct, kw_only=True):
    """Create post request."""

    images: Annotated[list[str], msgspec.Meta(min_length=1)]
    caption: str | None = None


class UpdatePostRequest(msgspec.Struct, kw_only=True):
    """Update post request.

    A field that is omitted or sent as ``null`` keeps its stored value, so a
    caption cannot be cleared through this request. Providing a non-empty
    ``images`` list replaces every existing image.
    """

    caption: str | None = None
    images: list[str] | None = None


class PostResponse(msgspec.Struct, kw_only=True):
    """Post response."""

    id: int
    author_id: int
    caption: str | None
    images: list[str]
    created_at: datetime
    updated_at: datetime
