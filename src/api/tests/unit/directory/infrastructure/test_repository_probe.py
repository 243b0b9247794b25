"""Unit tests for the user directory repository probe."""

from unittest.mock import MagicMock

from directory.infrastructure.observability import (
    DefaultUserDirectoryRepositoryProbe,
)
from infrastructure.observability import ObservationContext


class TestDefaultUserDirectoryRepositoryProbe:
    """Tests for DefaultUserDirectoryRepositoryProbe."""

    def test_user_added_logs_info(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryRepositoryProbe(logger=logger)

        probe.user_added("01ABC", "alice@acme.com")

        logger.info.assert_called_once_with(
            "user_added", user_id="01ABC", email="alice@acme.com"
        )

    def test_lookups_log_at_debug(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryRepositoryProbe(logger=logger)

        probe.user_retrieved("01ABC", "refid")
        probe.user_not_found("email")

        assert logger.debug.call_count == 2
        logger.info.assert_not_called()

    def test_membership_removed_includes_rows(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryRepositoryProbe(logger=logger)

        probe.membership_removed("01ABC", "01ORG", 0)

        logger.info.assert_called_once_with(
            "membership_removed", user_id="01ABC", org_id="01ORG", rows=0
        )

    def test_with_context_adds_context_to_events(self):
        logger = MagicMock()
        context = ObservationContext(request_id="req-1", org_id="01ORG")
        probe = DefaultUserDirectoryRepositoryProbe(logger=logger).with_context(context)

        probe.users_listed("01ORG", "active", 4)

        logger.debug.assert_called_once_with(
            "users_listed",
            org_id="01ORG",
            listing="active",
            count=4,
            request_id="req-1",
            acting_org_id="01ORG",
        )

    def test_with_context_keeps_logger(self):
        logger = MagicMock()
        probe = DefaultUserDirectoryRepositoryProbe(logger=logger)

        bound = probe.with_context(ObservationContext(request_id="req-1"))

        assert bound._logger is logger
        assert probe._context is None
