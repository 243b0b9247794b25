"""Unit tests for the user directory service probe."""

from unittest.mock import MagicMock

import structlog

from directory.application.observability import DefaultUserDirectoryServiceProbe
from infrastructure.observability import ObservationContext


class TestDefaultUserDirectoryServiceProbeInit:
    """Tests for DefaultUserDirectoryServiceProbe initialization."""

    def test_creates_with_default_logger(self):
        probe = DefaultUserDirectoryServiceProbe()

        assert probe._logger is not None

    def test_creates_with_custom_logger(self):
        custom_logger = structlog.get_logger()
        probe = DefaultUserDirectoryServiceProbe(logger=custom_logger)

        assert probe._logger is custom_logger


class TestServiceProbeEvents:
    """Tests for the events emitted by the service probe."""

    def test_user_provisioned(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryServiceProbe(logger=logger)

        probe.user_provisioned(user_id="01ABC", email="alice@acme.com")

        logger.info.assert_called_once_with(
            "user_provisioned", user_id="01ABC", email="alice@acme.com"
        )

    def test_user_deactivated(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryServiceProbe(logger=logger)

        probe.user_deactivated(user_id="01ABC", org_id="01ORG", was_member=False)

        logger.info.assert_called_once_with(
            "user_deactivated", user_id="01ABC", org_id="01ORG", was_member=False
        )

    def test_store_operation_failed_logs_error(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryServiceProbe(logger=logger)

        probe.store_operation_failed(
            operation="get user", argument="01ABC", error="connection refused"
        )

        logger.error.assert_called_once_with(
            "directory_store_operation_failed",
            operation="get user",
            argument="01ABC",
            error="connection refused",
        )

    def test_active_user_count_failed_logs_error(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryServiceProbe(logger=logger)

        probe.active_user_count_failed(error="timeout")

        logger.error.assert_called_once_with("active_user_count_failed", error="timeout")

    def test_transaction_missing_logs_warning(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryServiceProbe(logger=logger)

        probe.transaction_missing("add user")

        logger.warning.assert_called_once_with(
            "directory_write_without_transaction", operation="add user"
        )

    def test_context_is_merged(self):
        logger = MagicMock()
        context = ObservationContext(user_id="01ADMIN", extra={"source": "admin"})
        probe = DefaultUserDirectoryServiceProbe(logger=logger).with_context(context)

        probe.password_changed(user_id="01ABC", matched=True)

        logger.info.assert_called_once_with(
            "user_password_changed",
            user_id="01ABC",
            matched=True,
            acting_user_id="01ADMIN",
            source="admin",
        )
