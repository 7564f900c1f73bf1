"""Request-scoped identity.

The guard resolves an :class:`Identity` from the session token and stores it
in the connection state; handlers receive it through the ``identity``
dependency instead of reading the state directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from litestar import Request

from photofeed.core.exceptions import UnauthenticatedError

IDENTITY_STATE_KEY = "identity"


@dataclass(frozen=True)
class Identity:
    """Authenticated caller for the current request."""

    subject: int
    email: str


async def get_identity(request: Request) -> Identity:
    """Provide the identity attached by the auth guard.

    Args:
        request: Litestar request.

    Returns:
        Identity of the caller.

    Raises:
        UnauthenticatedError: If the route is not guarded.
    """
    identity = request.state.get(IDENTITY_STATE_KEY)
    if not isinstance(identity, Identity):
        raise UnauthenticatedError()
    return identity
