"""Composition helpers for the user directory.

Callers obtain a session (see ``infrastructure.database.dependencies``),
then build a service bound to it for the duration of one request.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from directory.application.observability import (
    DefaultUserDirectoryServiceProbe,
    UserDirectoryServiceProbe,
)
from directory.application.services import UserDirectoryService
from directory.infrastructure.observability import (
    DefaultUserDirectoryRepositoryProbe,
    UserDirectoryRepositoryProbe,
)
from directory.infrastructure.user_directory_repository import (
    UserDirectoryRepository,
)
from infrastructure.observability import ObservationContext
from infrastructure.settings import DirectorySettings, get_directory_settings


def get_user_directory_repository(
    session: AsyncSession,
    context: ObservationContext | None = None,
) -> UserDirectoryRepository:
    """Get UserDirectoryRepository bound to a session.

    Args:
        session: Caller's database session
        context: Optional request metadata merged into repository log events

    Returns:
        UserDirectoryRepository instance
    """
    probe: UserDirectoryRepositoryProbe = DefaultUserDirectoryRepositoryProbe()
    if context is not None:
        probe = probe.with_context(context)
    return UserDirectoryRepository(session=session, probe=probe)


def build_user_directory_service(
    session: AsyncSession,
    context: ObservationContext | None = None,
    settings: DirectorySettings | None = None,
) -> UserDirectoryService:
    """Build a UserDirectoryService for one request.

    Args:
        session: Caller's database session; open a transaction on it
            before calling write operations
        context: Optional request metadata merged into all log events
        settings: Optional directory settings (defaults to environment)

    Returns:
        UserDirectoryService sharing the session with its repository
    """
    probe: UserDirectoryServiceProbe = DefaultUserDirectoryServiceProbe()
    if context is not None:
        probe = probe.with_context(context)

    return UserDirectoryService(
        repository=get_user_directory_repository(session, context),
        session=session,
        probe=probe,
        settings=settings or get_directory_settings(),
    )
