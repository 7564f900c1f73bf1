from enum import Enum


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class ErrorKind(str, Enum):
    """Machine-readable error kinds surfaced to API callers."""

    DUPLICATE_CREDENTIAL = "duplicate_credential"
    DUPLICATE_USERNAME = "duplicate_username"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    OWNERSHIP_VIOLATION = "ownership_violation"
    RESOURCE_NOT_FOUND = "resource_not_found"
