"""Unit tests for ConsoleAdapter (structured console logging).

Architecture:
- Unit tests with mocked structlog
- Tests protocol compliance
"""

from unittest.mock import MagicMock, patch

import pytest

from passhash.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
    drop_secret_fields,
)

STRUCTLOG = "passhash.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("event", cost=10)

            getattr(mock_logger, level).assert_called_once_with("event", cost=10)

    @pytest.mark.parametrize("level", ["error", "critical"])
    def test_flattens_exception(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("failed", error=ValueError("Invalid salt"))

            getattr(mock_logger, level).assert_called_once_with(
                "failed",
                error_type="ValueError",
                error_message="Invalid salt",
            )

    def test_error_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("failed", error_code="primitive_failure")

            mock_logger.error.assert_called_once_with(
                "failed", error_code="primitive_failure"
            )


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test renderer selection."""

    def test_json_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=False)

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    def test_level_filter(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(app="passhash")
            bound.info("event")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(app="passhash")
            bound_logger.info.assert_called_once_with("event")

    def test_with_context_is_bind(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(operation="verify")

            mock_logger.bind.assert_called_once_with(operation="verify")


@pytest.mark.unit
class TestDropSecretFields:
    """Test the secret-stripping processor."""

    def test_removes_password_and_hash_keys(self):
        event = {
            "event": "verify_password_failed",
            "password": "hunter2",
            "password_hash": "$2b$10$...",
            "hashed": b"$2b$10$...",
            "error_code": "mismatch",
        }

        result = drop_secret_fields(None, "info", event)

        assert result == {"event": "verify_password_failed", "error_code": "mismatch"}

    def test_keeps_events_without_secrets(self):
        event = {"event": "password_hashed", "cost": 10}

        assert drop_secret_fields(None, "debug", dict(event)) == event

    def test_is_first_processor(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[0] is drop_secret_fields
