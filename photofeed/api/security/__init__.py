"""Security module for authentication and authorization."""

from .context import Identity, get_identity
from .cookies import CookieConfig, clear_session_cookie, session_cookie
from .guards import auth_guard, authenticate, extract_token_from_cookies
from .jwt import JWTConfig, JWTService, TokenClaim
from .ownership import ensure_owner, is_owner
from .password import PasswordConfig, PasswordService

__all__ = [
    # Context
    "Identity",
    "get_identity",
    # Cookies
    "CookieConfig",
    "clear_session_cookie",
    "session_cookie",
    # Guards
    "auth_guard",
    "authenticate",
    "extract_token_from_cookies",
    # JWT
    "JWTConfig",
    "JWTService",
    "TokenClaim",
    # Ownership
    "ensure_owner",
    "is_owner",
    # Password
    "PasswordConfig",
    "PasswordService",
]
