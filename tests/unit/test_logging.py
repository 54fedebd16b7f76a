"""Tests for logging setup and eviction logs."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
from helpers import StubEstimator, make_request, make_result, make_system, make_user

from mamba_memory.config import LoggingConfig
from mamba_memory.observability import StructuredFormatter, setup_logging
from mamba_memory.window import WindowedMessageBuffer


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after each test."""
    logger = logging.getLogger("mamba_memory")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_sets_level(self, package_logger: logging.Logger) -> None:
        setup_logging(LoggingConfig(level="DEBUG"))
        assert package_logger.level == logging.DEBUG

    def test_reconfigure_does_not_duplicate_handlers(
        self, package_logger: logging.Logger
    ) -> None:
        """Calling twice leaves one managed handler."""
        before = len(package_logger.handlers)

        setup_logging()
        setup_logging(LoggingConfig(structured=True))

        assert len(package_logger.handlers) == before + 1
        assert isinstance(package_logger.handlers[-1].formatter, StructuredFormatter)


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_formats_json_with_extras(self) -> None:
        record = logging.LogRecord(
            "mamba_memory.window", logging.DEBUG, __file__, 1, "Evicted %d", (2,), None
        )
        record.identity = "conv-1"

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["message"] == "Evicted 2"
        assert payload["level"] == "DEBUG"
        assert payload["logger"] == "mamba_memory.window"
        assert payload["identity"] == "conv-1"


class TestEvictionLogging:
    """Eviction decisions are logged at DEBUG."""

    def test_eviction_and_orphans_logged(
        self, estimator: StubEstimator, caplog: pytest.LogCaptureFixture
    ) -> None:
        memory = WindowedMessageBuffer(capacity=20, estimator=estimator)
        memory.add(make_request("req", 10, "call_1"))
        memory.add(make_result("call_1", 5))

        with caplog.at_level(logging.DEBUG, logger="mamba_memory"):
            memory.add(make_user("u", 10))

        text = caplog.text
        assert "Evicting assistant message (10 tokens)" in text
        assert "Evicting orphan tool result call_1 (5 tokens)" in text

    def test_duplicate_system_logged(
        self, estimator: StubEstimator, caplog: pytest.LogCaptureFixture
    ) -> None:
        memory = WindowedMessageBuffer(capacity=20, estimator=estimator)
        memory.add(make_system("S", 5))

        with caplog.at_level(logging.DEBUG, logger="mamba_memory"):
            memory.add(make_system("S", 5))

        assert "Ignoring duplicate system message" in caplog.text
