"""Tests for structured logging configuration."""

import logging

import pytest
import structlog

from esg_api.logging_config import bind_request_context, clear_request_context, get_logger, setup_logging


class TestSetupLogging:
    """Test logging setup function."""

    @pytest.mark.parametrize("json_logs", [True, False])
    def test_setup_logging_modes(self, json_logs):
        """Both JSON and console renderers configure without error."""
        setup_logging(json_logs=json_logs, log_level="INFO")

        logger = get_logger("test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "warning")

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "info"])
    def test_setup_logging_accepts_levels(self, level):
        """Level names are accepted in any case."""
        setup_logging(json_logs=False, log_level=level)

    def test_invalid_level_raises(self):
        with pytest.raises(AttributeError):
            setup_logging(json_logs=False, log_level="VERBOSE")


class TestGetLogger:
    def test_logger_accepts_event_and_context(self):
        """Events are snake_case names with keyword context."""
        setup_logging(json_logs=False)
        logger = get_logger(__name__)

        # Should not raise
        logger.info("company_ranking_requested", metric="emissions", limit=10)
        logger.warning("request_rejected", status_code=400, error="Invalid metric")


class TestRequestContext:
    """Trace id binding used by the request middleware."""

    def teardown_method(self):
        structlog.contextvars.clear_contextvars()

    def test_bind_request_context(self):
        bind_request_context("abc123", "GET", "/api/v1/dashboard/statistics")

        ctx = structlog.contextvars.get_contextvars()
        assert ctx == {"trace_id": "abc123", "method": "GET", "path": "/api/v1/dashboard/statistics"}

    def test_bind_replaces_previous_request(self):
        bind_request_context("first", "GET", "/a")
        bind_request_context("second", "POST", "/b")

        assert structlog.contextvars.get_contextvars()["trace_id"] == "second"

    def test_clear_request_context(self):
        bind_request_context("abc123", "GET", "/")
        clear_request_context()

        assert structlog.contextvars.get_contextvars() == {}


class TestStdlibLoggersCoexist:
    def test_service_loggers_use_stdlib(self):
        """Services log through the standard library under their module names."""
        from esg_api.services import report_service

        assert isinstance(report_service.logger, logging.Logger)
        assert report_service.logger.name == "esg_api.services.report_service"
