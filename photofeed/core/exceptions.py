"""Application exceptions.

Every recoverable error carries a stable ``kind`` and an HTTP status so the
API layer can render it without inspecting the message.
"""

from __future__ import annotations

from litestar.status_codes import (
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
)

from photofeed.core.enums import ErrorKind


class PhotofeedError(Exception):
    """Base exception for recoverable application errors."""

    kind: ErrorKind
    status_code: int
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None, cause: Exception | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        self.cause = cause


class DuplicateCredentialError(PhotofeedError):
    """Email is already registered."""

    kind = ErrorKind.DUPLICATE_CREDENTIAL
    status_code = HTTP_409_CONFLICT
    default_message = "Email already exists"


class DuplicateUsernameError(PhotofeedError):
    """Username is already taken by another account."""

    kind = ErrorKind.DUPLICATE_USERNAME
    status_code = HTTP_409_CONFLICT
    default_message = "Username already taken"


class InvalidCredentialsError(PhotofeedError):
    """Unknown email or wrong password.

    The message is fixed so callers cannot tell the two apart.
    """

    kind = ErrorKind.INVALID_CREDENTIALS
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"

    def __init__(self, cause: Exception | None = None) -> None:
        super().__init__(None, cause)


class UnauthenticatedError(PhotofeedError):
    """Request carries no usable session token."""

    kind = ErrorKind.UNAUTHENTICATED
    status_code = HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"

    reason = "unauthenticated"

    def __init__(self, cause: Exception | None = None) -> None:
        super().__init__(None, cause)


class MissingTokenError(UnauthenticatedError):
    """No session cookie was presented."""

    reason = "missing"


class InvalidTokenError(UnauthenticatedError):
    """Session token is expired, tampered with, or malformed."""

    reason = "invalid"


class OwnershipViolationError(PhotofeedError):
    """Caller does not own the resource it tried to modify."""

    kind = ErrorKind.OWNERSHIP_VIOLATION
    status_code = HTTP_403_FORBIDDEN
    default_message = "Not allowed"


class ResourceNotFoundError(PhotofeedError):
    """Requested resource doesn't exist."""

    kind = ErrorKind.RESOURCE_NOT_FOUND
    status_code = HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConfigurationError(Exception):
    """Fatal startup configuration problem."""
