"""Session cookie transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from litestar.datastructures import Cookie


@dataclass(frozen=True)
class CookieConfig:
    """Attributes of the cookie carrying the session token."""

    name: str = "access_token"
    max_age: int = 7 * 24 * 60 * 60
    secure: bool = True
    httponly: bool = True
    samesite: Literal["lax", "strict", "none"] = "strict"
    path: str = "/"


def session_cookie(config: CookieConfig, token: str) -> Cookie:
    """Build the cookie that stores a freshly issued token."""
    return Cookie(
        key=config.name,
        value=token,
        max_age=config.max_age,
        path=config.path,
        secure=config.secure,
        httponly=config.httponly,
        samesite=config.samesite,
    )


def clear_session_cookie(config: CookieConfig) -> Cookie:
    """Build a cookie instructing the client to discard the session."""
    return Cookie(
        key=config.name,
        value="",
        max_age=0,
        path=config.path,
        secure=config.secure,
        httponly=config.httponly,
        samesite=config.samesite,
    )
