"""Unit tests for directory composition helpers."""

from unittest.mock import AsyncMock

from directory.application.services import UserDirectoryService
from directory.dependencies import (
    build_user_directory_service,
    get_user_directory_repository,
)
from directory.infrastructure.user_directory_repository import (
    UserDirectoryRepository,
)
from infrastructure.observability import ObservationContext
from infrastructure.settings import DirectorySettings


class TestGetUserDirectoryRepository:
    """Tests for get_user_directory_repository."""

    def test_binds_session(self):
        session = AsyncMock()

        repository = get_user_directory_repository(session)

        assert isinstance(repository, UserDirectoryRepository)
        assert repository._session is session

    def test_binds_context_into_probe(self):
        context = ObservationContext(request_id="req-1")

        repository = get_user_directory_repository(AsyncMock(), context)

        assert repository._probe._context is context


class TestBuildUserDirectoryService:
    """Tests for build_user_directory_service."""

    def test_shares_session_with_repository(self):
        session = AsyncMock()

        service = build_user_directory_service(session)

        assert isinstance(service, UserDirectoryService)
        assert service._session is session
        assert service._repository._session is session

    def test_uses_given_settings(self):
        settings = DirectorySettings(count_failure_returns_zero=False)

        service = build_user_directory_service(AsyncMock(), settings=settings)

        assert service._settings is settings

    def test_binds_context_into_both_probes(self):
        context = ObservationContext(request_id="req-1", org_id="01ORG")

        service = build_user_directory_service(AsyncMock(), context=context)

        assert service._probe._context is context
        assert service._repository._probe._context is context
