"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from infrastructure.settings import (
    DatabaseSettings,
    DirectorySettings,
    get_directory_settings,
    get_settings,
)


class TestDatabaseSettingsPoolConfiguration:
    """Tests for database pool configuration."""

    def test_default_pool_size(self):
        assert DatabaseSettings().pool_max_connections == 10

    def test_pool_max_must_be_positive(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=0)

    def test_pool_max_respects_upper_limit(self):
        with pytest.raises(ValidationError):
            DatabaseSettings(pool_max_connections=101)


class TestDatabaseSettingsEnvironment:
    """Tests for environment-driven database settings."""

    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("DIRECTORY_DB_HOST", "db.internal")
        monkeypatch.setenv("DIRECTORY_DB_PORT", "6543")

        settings = DatabaseSettings()

        assert settings.host == "db.internal"
        assert settings.port == 6543

    def test_connection_string_omits_password(self):
        settings = DatabaseSettings(password="hunter2")

        assert "hunter2" not in settings.connection_string
        assert settings.connection_string.startswith("postgresql://")


class TestDirectorySettings:
    """Tests for directory behaviour settings."""

    def test_count_fails_open_by_default(self):
        assert DirectorySettings().count_failure_returns_zero is True

    def test_count_failure_flag_from_environment(self, monkeypatch):
        monkeypatch.setenv("DIRECTORY_COUNT_FAILURE_RETURNS_ZERO", "false")

        assert DirectorySettings().count_failure_returns_zero is False

    def test_getter_is_cached(self):
        get_directory_settings.cache_clear()

        assert get_directory_settings() is get_directory_settings()


class TestSettings:
    """Tests for the aggregated application settings."""

    def test_exposes_sections(self):
        settings = get_settings()

        assert isinstance(settings.debug, bool)
        assert isinstance(settings.database, DatabaseSettings)
        assert settings.directory is get_directory_settings()
