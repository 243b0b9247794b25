"""Unit test fixtures with mocked dependencies."""

import pytest

from directory.domain.aggregates import User


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


@pytest.fixture
def alice() -> User:
    """A user that has not been provisioned yet."""
    return User.create(
        firstname="Alice",
        lastname="Smith",
        email="alice@acme.com",
        password="hash",
        salt="salt",
    )
