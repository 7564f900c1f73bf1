"""Authentication guards for Litestar routes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from litestar.connection import ASGIConnection
from litestar.handlers import BaseRouteHandler

from photofeed.api.security.context import IDENTITY_STATE_KEY, Identity
from photofeed.api.security.cookies import CookieConfig
from photofeed.core.exceptions import InvalidTokenError, MissingTokenError

if TYPE_CHECKING:
    from photofeed.api.security.jwt import JWTService

logger = logging.getLogger(__name__)


def extract_token_from_cookies(cookies: dict[str, str], cookie_name: str) -> str | None:
    """Extract the session token from request cookies.

    Args:
        cookies: Parsed request cookies.
        cookie_name: Name of the session cookie.

    Returns:
        Token string if present and non-empty, None otherwise.
    """
    return cookies.get(cookie_name) or None


def authenticate(token: str | None, jwt_service: JWTService) -> Identity:
    """Resolve the caller's identity from a session token.

    Args:
        token: Token taken from the transport, if any.
        jwt_service: Service used to verify the token.

    Returns:
        Identity carried by the token.

    Raises:
        MissingTokenError: If no token was presented.
        InvalidTokenError: If the token fails verification.
    """
    if not token:
        raise MissingTokenError()

    claim = jwt_service.verify(token)
    if claim is None:
        raise InvalidTokenError()

    return Identity(subject=claim.subject, email=claim.email)


async def auth_guard(connection: ASGIConnection, _: BaseRouteHandler) -> None:
    """Guard that requires a valid session cookie.

    Sets the caller's identity in connection state for downstream handlers.

    Args:
        connection: ASGI connection.
        _: Route handler (unused).

    Raises:
        MissingTokenError: If no session cookie is present.
        InvalidTokenError: If the session token is invalid or expired.
    """
    jwt_service: JWTService | None = connection.app.state.get("jwt_service")
    if jwt_service is None:
        raise RuntimeError("JWT service not configured")

    cookie_config: CookieConfig = connection.app.state.get("cookie_config") or CookieConfig()
    token = extract_token_from_cookies(connection.cookies, cookie_config.name)

    try:
        identity = authenticate(token, jwt_service)
    except (MissingTokenError, InvalidTokenError) as e:
        logger.debug(f"Rejected request to {connection.url.path}: {e.reason} token")
        raise

    connection.state[IDENTITY_STATE_KEY] = identity
