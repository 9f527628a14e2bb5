"""Tests for the logging utility module."""

import pytest


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self, mock_env_vars):
        """Test configure_logging with defaults."""
        from src.utils.logging import configure_logging

        # Should not raise
        configure_logging()

    def test_configure_logging_debug_level(self, mock_env_vars):
        from src.utils.logging import configure_logging

        configure_logging(level="DEBUG")

    def test_configure_logging_json_format(self, mock_env_vars):
        from src.utils.logging import configure_logging

        configure_logging(json_format=True)

    def test_configure_logging_no_timestamp(self, mock_env_vars):
        from src.utils.logging import configure_logging

        configure_logging(include_timestamp=False)

    def test_configure_from_settings(self, mock_env_vars):
        """Test configuration driven by REFINER_* settings."""
        from src.utils.logging import configure_from_settings

        configure_from_settings()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_default(self, mock_env_vars):
        from src.utils.logging import configure_logging, get_logger

        configure_logging()
        assert get_logger() is not None

    def test_get_logger_with_context(self, mock_env_vars):
        from src.utils.logging import configure_logging, get_logger

        configure_logging()
        logger = get_logger(session_id="teach-1")

        assert logger is not None


class TestLogContext:
    """Tests for LogContext."""

    def test_binds_and_unbinds(self, mock_env_vars):
        import structlog

        from src.utils.logging import LogContext

        with LogContext(session_id="teach-1"):
            assert structlog.contextvars.get_contextvars()["session_id"] == "teach-1"

        assert "session_id" not in structlog.contextvars.get_contextvars()


class TestLogOperation:
    """Tests for log_operation."""

    def test_success(self, mock_env_vars):
        from src.utils.logging import log_operation

        with log_operation("refine_session") as op:
            op["refined_count"] = 2

        assert op["success"] is True
        assert op["refined_count"] == 2

    def test_failure_reraises(self, mock_env_vars):
        from src.utils.logging import log_operation

        with pytest.raises(RuntimeError):
            with log_operation("refine_session") as op:
                raise RuntimeError("boom")

        assert op["success"] is False
        assert op["error"] == "boom"
