"""Integration test fixtures for the user directory.

Runs the real repository and service against an in-memory SQLite database
(aiosqlite), created fresh for every test from the ORM metadata.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import directory.infrastructure.models  # noqa: F401  (populates metadata)
from directory.application.services import UserDirectoryService
from directory.dependencies import build_user_directory_service
from directory.domain.value_objects import OrganizationId, SpaceId, UserRefId
from directory.infrastructure.models import (
    AccountModel,
    OrganizationModel,
    SpaceRoleModel,
)
from infrastructure.database.models import Base
from infrastructure.settings import DirectorySettings

DirectoryFactory = Callable[[], AbstractAsyncContextManager[UserDirectoryService]]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against a real database)",
    )


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Provide an engine over a fresh in-memory database with the schema created."""
    eng = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def directory_settings() -> DirectorySettings:
    """Directory settings with the default fail-open count."""
    return DirectorySettings(count_failure_returns_zero=True)


@pytest.fixture
def writer(
    session_factory: async_sessionmaker[AsyncSession],
    directory_settings: DirectorySettings,
) -> DirectoryFactory:
    """Open a service inside a transaction that commits when the block exits."""

    @asynccontextmanager
    async def _writer() -> AsyncIterator[UserDirectoryService]:
        async with session_factory() as session, session.begin():
            yield build_user_directory_service(session, settings=directory_settings)

    return _writer


@pytest.fixture
def reader(
    session_factory: async_sessionmaker[AsyncSession],
    directory_settings: DirectorySettings,
) -> DirectoryFactory:
    """Open a service on a plain session for lookups and listings."""

    @asynccontextmanager
    async def _reader() -> AsyncIterator[UserDirectoryService]:
        async with session_factory() as session:
            yield build_user_directory_service(session, settings=directory_settings)

    return _reader


class DirectorySeeder:
    """Writes the organization, membership and space-grant rows the
    directory reads but does not own.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def organization(self, domain: str) -> OrganizationId:
        org_id = OrganizationId.generate()
        async with self._session_factory() as session, session.begin():
            session.add(OrganizationModel(refid=org_id.value, domain=domain))
        return org_id

    async def membership(
        self, user_id: UserRefId, org_id: OrganizationId, active: bool = True
    ) -> None:
        async with self._session_factory() as session, session.begin():
            session.add(
                AccountModel(userid=user_id.value, orgid=org_id.value, active=active)
            )

    async def space_grant(
        self, user_id: UserRefId, org_id: OrganizationId, space_id: SpaceId
    ) -> None:
        async with self._session_factory() as session, session.begin():
            session.add(
                SpaceRoleModel(
                    orgid=org_id.value, labelid=space_id.value, userid=user_id.value
                )
            )


@pytest.fixture
def seed(session_factory: async_sessionmaker[AsyncSession]) -> DirectorySeeder:
    """Provide a seeder for tenant-scoping fixture rows."""
    return DirectorySeeder(session_factory)
