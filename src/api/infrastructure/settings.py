"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        DIRECTORY_DB_HOST: Database host (default: localhost)
        DIRECTORY_DB_PORT: Database port (default: 5432)
        DIRECTORY_DB_DATABASE: Database name (default: directory)
        DIRECTORY_DB_USERNAME: Database user (default: directory)
        DIRECTORY_DB_PASSWORD: Database password (required in production)
        DIRECTORY_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTORY_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="directory", description="Database name")
    username: str = Field(default="directory", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class DirectorySettings(BaseSettings):
    """User directory behaviour settings.

    Environment variables:
        DIRECTORY_COUNT_FAILURE_RETURNS_ZERO: Report 0 active users instead of
            raising when the count query fails (default: true)
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    count_failure_returns_zero: bool = Field(
        default=True,
        description=(
            "When the active user count query fails, log the failure and "
            "report 0 rather than raising"
        ),
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = Field(
        default=False, description="Emit debug-level probe events (DEBUG)"
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def directory(self) -> DirectorySettings:
        """Get directory settings."""
        return get_directory_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_directory_settings() -> DirectorySettings:
    """Get cached directory settings."""
    return DirectorySettings()
