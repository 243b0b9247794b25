"""User directory application service.

Exposes the directory operations to the authentication/session layer and
to administrative listings. Enforces the directory invariants on top of
the repository:

- emails (and domains) are trimmed and lower-cased before storage and
  comparison
- every mutation stamps ``revised`` with the current UTC time
- writes only run inside a caller-owned transaction
- store failures surface as PersistenceError, keyed lookups that find
  nothing as NotFoundError
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from typing import AsyncIterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import SessionTransactionOrigin

from directory.application.observability import (
    DefaultUserDirectoryServiceProbe,
    UserDirectoryServiceProbe,
)
from directory.domain.aggregates import User
from directory.domain.value_objects import (
    SpaceId,
    TenantScope,
    UserRefId,
    normalize_domain,
    normalize_email,
)
from directory.ports.exceptions import (
    NotFoundError,
    PersistenceError,
    TransactionRequiredError,
)
from directory.ports.repositories import IUserDirectoryRepository
from infrastructure.settings import DirectorySettings, get_directory_settings

# Driver-level timeouts and cancellations arrive as DBAPIError (a
# SQLAlchemyError); TimeoutError covers asyncio.wait_for around a call.
_STORE_FAILURES = (SQLAlchemyError, TimeoutError)


def _redact(secret: str) -> str:
    """Shorten a token or serial so it can appear in errors and logs."""
    return f"{secret[:4]}***" if len(secret) > 4 else "***"


class UserDirectoryService:
    """Application service for the multi-tenant user directory.

    One instance serves one request: it is bound to the caller's session,
    which must be inside ``session.begin()`` for write operations.
    Organization-scoped operations take the caller's TenantScope.
    """

    def __init__(
        self,
        repository: IUserDirectoryRepository,
        session: AsyncSession,
        probe: UserDirectoryServiceProbe | None = None,
        settings: DirectorySettings | None = None,
    ):
        """Initialize UserDirectoryService with dependencies.

        Args:
            repository: Repository for user persistence
            session: Caller's database session (transactional for writes)
            probe: Optional domain probe for observability
            settings: Optional directory settings (defaults to environment)
        """
        self._repository = repository
        self._session = session
        self._probe = probe or DefaultUserDirectoryServiceProbe()
        self._settings = settings or get_directory_settings()

    @asynccontextmanager
    async def _store_call(
        self, operation: str, argument: str | None = None
    ) -> AsyncIterator[None]:
        """Translate store failures raised inside the block."""
        try:
            yield
        except _STORE_FAILURES as e:
            self._probe.store_operation_failed(
                operation=operation, argument=argument, error=str(e)
            )
            raise PersistenceError(operation, argument, detail=str(e)) from e

    def _require_transaction(self, operation: str, argument: str | None) -> None:
        # an autobegun transaction (left by an earlier read) is rolled back
        # on close, so only a caller-opened transaction accepts writes
        transaction = self._session.sync_session.get_transaction()
        if (
            transaction is None
            or transaction.origin is SessionTransactionOrigin.AUTOBEGIN
        ):
            self._probe.transaction_missing(operation)
            raise TransactionRequiredError(operation, argument)

    async def add(self, user: User) -> User:
        """Provision a new user record.

        Stamps created and revised with the same instant, normalizes the
        email and starts the user with no pending reset.

        Args:
            user: The user to insert; its timestamps and reset are ignored

        Returns:
            The record as stored

        Raises:
            PersistenceError: If the insert fails (e.g. duplicate refid)
        """
        operation = "add user"
        self._require_transaction(operation, user.id.value)

        now = datetime.now(UTC)
        stamped = replace(
            user,
            email=normalize_email(user.email),
            reset="",
            created=now,
            revised=now,
        )

        async with self._store_call(operation, user.id.value):
            await self._repository.add(stamped)

        self._probe.user_provisioned(user_id=stamped.id.value, email=stamped.email)
        return stamped

    async def get(self, ref_id: UserRefId) -> User:
        """Return the user with the given reference id.

        Raises:
            NotFoundError: If no user has this reference id
            PersistenceError: If the lookup fails
        """
        async with self._store_call("get user", ref_id.value):
            user = await self._repository.get_by_ref_id(ref_id)

        if user is None:
            raise NotFoundError("reference id", ref_id.value)
        return user

    async def get_by_domain(self, domain: str, email: str) -> User | None:
        """Match a user by email within the organization owning ``domain``.

        A user whose only memberships belong to other organizations is
        never returned, even when the email matches.

        Returns:
            The user, or None when nothing matches
        """
        domain = normalize_domain(domain)
        email = normalize_email(email)

        async with self._store_call("get user by domain", f"{domain} {email}"):
            return await self._repository.get_by_domain(domain, email)

    async def get_by_email(self, email: str) -> User | None:
        """Match a user by email across every organization.

        Returns:
            The user, or None when nothing matches
        """
        email = normalize_email(email)

        async with self._store_call("get user by email", email):
            return await self._repository.get_by_email(email)

    async def get_by_token(self, token: str) -> User:
        """Return the user holding a pending reset token.

        Raises:
            NotFoundError: If no user holds this token
            PersistenceError: If the lookup fails
        """
        # an empty token would match every user without a pending reset
        if not token:
            raise NotFoundError("reset token", "")

        async with self._store_call("get user by token", _redact(token)):
            user = await self._repository.get_by_reset_token(token)

        if user is None:
            raise NotFoundError("reset token", _redact(token))
        return user

    async def get_by_serial(self, serial: str) -> User:
        """Return the invited user identified by an onboarding serial.

        The serial is the temporary salt written when the user was invited;
        once a real password and salt are set it no longer resolves.

        Raises:
            NotFoundError: If no user has this serial
            PersistenceError: If the lookup fails
        """
        if not serial:
            raise NotFoundError("onboarding serial", "")

        async with self._store_call("get user by serial", _redact(serial)):
            user = await self._repository.get_by_salt(serial)

        if user is None:
            raise NotFoundError("onboarding serial", _redact(serial))
        return user

    async def get_active_users_for_organization(self, scope: TenantScope) -> list[User]:
        """Users with an active membership in the organization, by name."""
        async with self._store_call("get active users by org", scope.org_id.value):
            return await self._repository.list_active_for_organization(scope)

    async def get_users_for_organization(self, scope: TenantScope) -> list[User]:
        """Users with any membership in the organization, by name."""
        async with self._store_call("get users for org", scope.org_id.value):
            return await self._repository.list_for_organization(scope)

    async def get_space_users(self, scope: TenantScope, space_id: SpaceId) -> list[User]:
        """Active organization members granted access to the space, by name."""
        async with self._store_call(
            "get space users", f"{scope.org_id.value} {space_id.value}"
        ):
            return await self._repository.list_for_space(scope, space_id)

    async def update_user(self, user: User) -> User:
        """Overwrite a user's first name, last name, email and initials.

        All four fields are written, so the caller must supply unchanged
        values too. Password, salt and reset are left alone.

        Returns:
            The record as written
        """
        operation = "update user"
        self._require_transaction(operation, user.id.value)

        updated = replace(
            user, email=normalize_email(user.email), revised=datetime.now(UTC)
        )

        async with self._store_call(operation, user.id.value):
            rows = await self._repository.update_profile(updated)

        self._probe.profile_updated(user_id=user.id.value, matched=rows > 0)
        return updated

    async def update_user_password(
        self, user_id: UserRefId, salt: str, password: str
    ) -> None:
        """Store a new salt and password hash and close any pending reset."""
        operation = "update user password"
        self._require_transaction(operation, user_id.value)

        async with self._store_call(operation, user_id.value):
            rows = await self._repository.update_password(
                user_id, salt, password, datetime.now(UTC)
            )

        self._probe.password_changed(user_id=user_id.value, matched=rows > 0)

    async def deactivate_user(self, user_id: UserRefId, scope: TenantScope) -> None:
        """Remove the user's membership in the scoped organization.

        The user record and memberships in other organizations are kept.
        Removing a membership that does not exist is not an error.
        """
        operation = "deactivate user"
        self._require_transaction(operation, user_id.value)

        async with self._store_call(
            operation, f"{user_id.value} {scope.org_id.value}"
        ):
            rows = await self._repository.remove_membership(user_id, scope)

        self._probe.user_deactivated(
            user_id=user_id.value, org_id=scope.org_id.value, was_member=rows > 0
        )

    async def forgot_user_password(self, email: str, token: str) -> None:
        """Issue a reset token for an email and clear the password.

        The password stays unusable until update_user_password is called.
        An email that matches nobody is not an error.

        Raises:
            ValueError: If the token is empty
            PersistenceError: If the update fails
        """
        if not token:
            raise ValueError("reset token must not be empty")

        operation = "password reset"
        email = normalize_email(email)
        self._require_transaction(operation, email)

        async with self._store_call(operation, email):
            rows = await self._repository.set_reset_token(
                email, token, datetime.now(UTC)
            )

        self._probe.password_reset_requested(email=email, matched=rows > 0)

    async def count_active_users(self) -> int:
        """Number of distinct users with at least one active membership.

        With ``count_failure_returns_zero`` enabled, a failing count is
        logged and reported as 0; otherwise it raises PersistenceError.
        """
        try:
            return await self._repository.count_active()
        except _STORE_FAILURES as e:
            if self._settings.count_failure_returns_zero:
                self._probe.active_user_count_failed(error=str(e))
                return 0
            self._probe.store_operation_failed(
                operation="count active users", argument=None, error=str(e)
            )
            raise PersistenceError("count active users", detail=str(e)) from e
