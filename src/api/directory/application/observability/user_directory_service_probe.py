"""Protocol for user directory service observability.

Defines the interface for domain probes that capture application-level
events of the user directory. This probe is also the logging sink for
failures that the service deliberately does not propagate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserDirectoryServiceProbe(Protocol):
    """Domain probe for user directory service operations."""

    def user_provisioned(self, user_id: str, email: str) -> None:
        """Record that a new user was added to the directory."""
        ...

    def profile_updated(self, user_id: str, matched: bool) -> None:
        """Record that a user's profile fields were overwritten."""
        ...

    def password_changed(self, user_id: str, matched: bool) -> None:
        """Record that a user's password was replaced and any reset closed."""
        ...

    def password_reset_requested(self, email: str, matched: bool) -> None:
        """Record that a reset token was issued for an email."""
        ...

    def user_deactivated(self, user_id: str, org_id: str, was_member: bool) -> None:
        """Record that a user's membership in an organization was removed."""
        ...

    def store_operation_failed(
        self, operation: str, argument: str | None, error: str
    ) -> None:
        """Record that the store failed and the failure is being raised."""
        ...

    def active_user_count_failed(self, error: str) -> None:
        """Record that the active user count failed and 0 was reported."""
        ...

    def transaction_missing(self, operation: str) -> None:
        """Record that a write was attempted without an open transaction."""
        ...

    def with_context(self, context: ObservationContext) -> UserDirectoryServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultUserDirectoryServiceProbe:
    """Default implementation of UserDirectoryServiceProbe using structlog."""

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
    ) -> DefaultUserDirectoryServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultUserDirectoryServiceProbe(logger=self._logger, context=context)

    def user_provisioned(self, user_id: str, email: str) -> None:
        """Record that a new user was added to the directory."""
        self._logger.info(
            "user_provisioned",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def profile_updated(self, user_id: str, matched: bool) -> None:
        """Record that a user's profile fields were overwritten."""
        self._logger.info(
            "user_profile_updated",
            user_id=user_id,
            matched=matched,
            **self._get_context_kwargs(),
        )

    def password_changed(self, user_id: str, matched: bool) -> None:
        """Record that a user's password was replaced and any reset closed."""
        self._logger.info(
            "user_password_changed",
            user_id=user_id,
            matched=matched,
            **self._get_context_kwargs(),
        )

    def password_reset_requested(self, email: str, matched: bool) -> None:
        """Record that a reset token was issued for an email."""
        self._logger.info(
            "user_password_reset_requested",
            email=email,
            matched=matched,
            **self._get_context_kwargs(),
        )

    def user_deactivated(self, user_id: str, org_id: str, was_member: bool) -> None:
        """Record that a user's membership in an organization was removed."""
        self._logger.info(
            "user_deactivated",
            user_id=user_id,
            org_id=org_id,
            was_member=was_member,
            **self._get_context_kwargs(),
        )

    def store_operation_failed(
        self, operation: str, argument: str | None, error: str
    ) -> None:
        """Record that the store failed and the failure is being raised."""
        self._logger.error(
            "directory_store_operation_failed",
            operation=operation,
            argument=argument,
            error=error,
            **self._get_context_kwargs(),
        )

    def active_user_count_failed(self, error: str) -> None:
        """Record that the active user count failed and 0 was reported."""
        self._logger.error(
            "active_user_count_failed",
            error=error,
            **self._get_context_kwargs(),
        )

    def transaction_missing(self, operation: str) -> None:
        """Record that a write was attempted without an open transaction."""
        self._logger.warning(
            "directory_write_without_transaction",
            operation=operation,
            **self._get_context_kwargs(),
        )
