"""Store protocols consumed by the service layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from photofeed.db.models import User


@runtime_checkable
class CredentialStore(Protocol):
    """Persistence of credential records.

    Implementations enforce email and username uniqueness; that guarantee
    is authoritative over any pre-check done by callers.
    """

    async def get_user_by_email(self, email: str) -> User | None:
        """Look up a credential record by email.

        Args:
            email: Email to look up.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def get_user_by_username(self, username: str) -> User | None:
        """Look up a credential record by username."""
        ...

    async def create_user(
        self,
        *,
        email: str,
        password_hash: str,
        username: str,
        display_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        """Create a credential record.

        Raises:
            DuplicateCredentialError: If the email is already registered.
            DuplicateUsernameError: If the username is already taken.
        """
        ...


@runtime_checkable
class OwnedResourceStore(Protocol):
    """Lookup of the owning user of a resource."""

    async def get_owner_id(self, resource_id: int) -> int | None:
        """Get the owner of a resource.

        Args:
            resource_id: Resource ID.

        Returns:
            Owner user id if the resource exists, None otherwise.
        """
        ...
