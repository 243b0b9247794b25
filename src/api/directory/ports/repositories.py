"""Repository protocol (port) for the user directory.

The directory store owns statement construction and row mapping. Callers
pass values already normalized by the service; the store compares them
against normalized column expressions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from directory.domain.aggregates import User
from directory.domain.value_objects import SpaceId, TenantScope, UserRefId


@runtime_checkable
class IUserDirectoryRepository(Protocol):
    """Persistence for User records and their tenant-scoped listings.

    Single-row lookups return None when nothing matches. Failures of the
    underlying store propagate as SQLAlchemy exceptions.
    """

    async def add(self, user: User) -> None:
        """Insert a new user row.

        Args:
            user: Fully stamped User (created/revised set by the caller)
        """
        ...

    async def get_by_ref_id(self, ref_id: UserRefId) -> User | None:
        """Retrieve a user by reference id."""
        ...

    async def get_by_domain(self, domain: str, email: str) -> User | None:
        """Retrieve a user by email among members of the organization
        owning ``domain``.

        Args:
            domain: Normalized organization domain
            email: Normalized email
        """
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by normalized email across all organizations."""
        ...

    async def get_by_reset_token(self, token: str) -> User | None:
        """Retrieve the user holding the given reset token."""
        ...

    async def get_by_salt(self, salt: str) -> User | None:
        """Retrieve the user whose salt equals the given value."""
        ...

    async def list_active_for_organization(self, scope: TenantScope) -> list[User]:
        """List users with an active membership in the scoped organization,
        ordered by first name then last name.
        """
        ...

    async def list_for_organization(self, scope: TenantScope) -> list[User]:
        """List users with any membership in the scoped organization,
        ordered by first name then last name.
        """
        ...

    async def list_for_space(self, scope: TenantScope, space_id: SpaceId) -> list[User]:
        """List users with an active membership in the scoped organization
        and a role grant on the space, ordered by first name then last name.
        """
        ...

    async def update_profile(self, user: User) -> int:
        """Overwrite first name, last name, email, initials and revised.

        Returns:
            Number of rows updated
        """
        ...

    async def update_password(
        self, ref_id: UserRefId, salt: str, password: str, revised: datetime
    ) -> int:
        """Set salt and password and clear the reset token.

        Returns:
            Number of rows updated
        """
        ...

    async def set_reset_token(self, email: str, token: str, revised: datetime) -> int:
        """Set the reset token and clear the password for a normalized email.

        Returns:
            Number of rows updated
        """
        ...

    async def remove_membership(self, ref_id: UserRefId, scope: TenantScope) -> int:
        """Delete the account row binding the user to the scoped organization.

        Returns:
            Number of rows deleted
        """
        ...

    async def count_active(self) -> int:
        """Count users with at least one active membership."""
        ...
