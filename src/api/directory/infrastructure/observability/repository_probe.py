"""Domain probe for user directory repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events of the directory store. Reset tokens and
onboarding serials are never passed to the probe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserDirectoryRepositoryProbe(Protocol):
    """Domain probe for user directory repository operations."""

    def user_added(self, user_id: str, email: str) -> None:
        """Record that a user row was inserted."""
        ...

    def user_retrieved(self, user_id: str, lookup: str) -> None:
        """Record that a single-row lookup matched a user."""
        ...

    def user_not_found(self, lookup: str) -> None:
        """Record that a single-row lookup matched nothing."""
        ...

    def users_listed(self, org_id: str, listing: str, count: int) -> None:
        """Record that a tenant-scoped listing was served."""
        ...

    def user_updated(self, user_id: str, fields: str, rows: int) -> None:
        """Record that user columns were updated."""
        ...

    def reset_token_set(self, email: str, rows: int) -> None:
        """Record that a reset token was stored for an email."""
        ...

    def membership_removed(self, user_id: str, org_id: str, rows: int) -> None:
        """Record that an account membership was deleted."""
        ...

    def active_users_counted(self, count: int) -> None:
        """Record the result of the active user count."""
        ...

    def with_context(
        self, context: ObservationContext
    ) -> UserDirectoryRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserDirectoryRepositoryProbe:
    """Default implementation of UserDirectoryRepositoryProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultUserDirectoryRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserDirectoryRepositoryProbe(logger=self._logger, context=context)

    def user_added(self, user_id: str, email: str) -> None:
        """Record that a user row was inserted."""
        self._logger.info(
            "user_added",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def user_retrieved(self, user_id: str, lookup: str) -> None:
        """Record that a single-row lookup matched a user."""
        self._logger.debug(
            "user_retrieved",
            user_id=user_id,
            lookup=lookup,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, lookup: str) -> None:
        """Record that a single-row lookup matched nothing."""
        self._logger.debug(
            "user_not_found",
            lookup=lookup,
            **self._get_context_kwargs(),
        )

    def users_listed(self, org_id: str, listing: str, count: int) -> None:
        """Record that a tenant-scoped listing was served."""
        self._logger.debug(
            "users_listed",
            org_id=org_id,
            listing=listing,
            count=count,
            **self._get_context_kwargs(),
        )

    def user_updated(self, user_id: str, fields: str, rows: int) -> None:
        """Record that user columns were updated."""
        self._logger.info(
            "user_updated",
            user_id=user_id,
            fields=fields,
            rows=rows,
            **self._get_context_kwargs(),
        )

    def reset_token_set(self, email: str, rows: int) -> None:
        """Record that a reset token was stored for an email."""
        self._logger.info(
            "reset_token_set",
            email=email,
            rows=rows,
            **self._get_context_kwargs(),
        )

    def membership_removed(self, user_id: str, org_id: str, rows: int) -> None:
        """Record that an account membership was deleted."""
        self._logger.info(
            "membership_removed",
            user_id=user_id,
            org_id=org_id,
            rows=rows,
            **self._get_context_kwargs(),
        )

    def active_users_counted(self, count: int) -> None:
        """Record the result of the active user count."""
        self._logger.debug(
            "active_users_counted",
            count=count,
            **self._get_context_kwargs(),
        )
