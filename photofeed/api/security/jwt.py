"""JWT session token handling."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt


@dataclass(frozen=True)
class TokenClaim:
    """Verified session token claim."""

    subject: int  # User id
    email: str
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class JWTConfig:
    """JWT configuration."""

    secret_key: str
    algorithm: str = "HS256"
    token_expire_days: int = 7
    issuer: str | None = None


class JWTService:
    """Session token creation and validation.

    Tokens are self-contained; there is no server-side revocation, so a
    token stays valid until it expires.
    """

    def __init__(self, config: JWTConfig) -> None:
        """Initialize JWT service.

        Args:
            config: JWT configuration.
        """
        self._config = config

    @property
    def token_lifetime(self) -> timedelta:
        """Session token lifetime."""
        return timedelta(days=self._config.token_expire_days)

    def issue(self, subject: int, email: str) -> tuple[str, datetime]:
        """Create a signed session token.

        Args:
            subject: User id to encode in token.
            email: User email.

        Returns:
            Tuple of (token string, expiration datetime).
        """
        now = datetime.now(timezone.utc)
        expires_at = now + self.token_lifetime

        payload: dict[str, Any] = {
            # PyJWT requires a string subject
            "sub": str(subject),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        if self._config.issuer:
            payload["iss"] = self._config.issuer

        token = jwt.encode(
            payload,
            self._config.secret_key,
            algorithm=self._config.algorithm,
        )

        return token, expires_at

    def verify(self, token: str) -> TokenClaim | None:
        """Decode and validate a session token.

        Every failure (bad signature, expiry, malformed structure, missing
        claims) yields the same ``None`` result.

        Args:
            token: JWT token string.

        Returns:
            TokenClaim if valid, None otherwise.
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                options={"require": ["sub", "email", "iat", "exp"]},
                issuer=self._config.issuer,
            )
            return TokenClaim(
                subject=int(payload["sub"]),
                email=str(payload["email"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except jwt.InvalidTokenError:
            return None
        except (TypeError, ValueError):
            return None
