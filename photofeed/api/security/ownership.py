"""Ownership checks for per-user resources."""

from __future__ import annotations

import logging

from photofeed.api.security.context import Identity
from photofeed.core.exceptions import OwnershipViolationError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def is_owner(identity: Identity, owner_id: int) -> bool:
    """Check whether the caller owns a resource."""
    return identity.subject == owner_id


def ensure_owner(
    identity: Identity,
    owner_id: int | None,
    *,
    resource: str = "Resource",
) -> int:
    """Authorize a mutation of an owned resource.

    The resource must exist before ownership is considered, so a missing
    resource is reported as not found rather than forbidden.

    Args:
        identity: Authenticated caller.
        owner_id: Owner id of the fetched resource, None if it doesn't exist.
        resource: Resource name used in error messages.

    Returns:
        The owner id.

    Raises:
        ResourceNotFoundError: If the resource doesn't exist.
        OwnershipViolationError: If the caller is not the owner.
    """
    if owner_id is None:
        raise ResourceNotFoundError(f"{resource} not found")

    if not is_owner(identity, owner_id):
        logger.warning(
            f"User {identity.subject} attempted to modify {resource.lower()} owned by {owner_id}"
        )
        raise OwnershipViolationError()

    return owner_id
