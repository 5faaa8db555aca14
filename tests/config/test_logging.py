"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from graphreach.config.logging import PACKAGE_LOGGER, SPAN_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ours = logging.getLogger(PACKAGE_LOGGER)
    spans = logging.getLogger(SPAN_LOGGER)
    levels = ours.level, spans.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ours.setLevel(levels[0])
    spans.setLevel(levels[1])


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("graphreach").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("graphreach").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("graphreach.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "graphreach.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("graphreach.infrastructure.graph.engine").debug("Built graph")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Built graph"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "graphreach.infrastructure.graph.engine"

    def test_quiet_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("graphreach.services.base").debug("Unknown vertex")
        assert capfd.readouterr().err == ""

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("networkx").debug("library noise")
        assert capfd.readouterr().err == ""

    def test_span_events_tagged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger(SPAN_LOGGER).debug("span.complete", span_name="odd_vertices")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["kind"] == "span"
        assert parsed["span_name"] == "odd_vertices"

    def test_other_events_untagged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("graphreach.services").warning("plain")
        assert "kind" not in json.loads(capfd.readouterr().err.strip())

    def test_span_logger_follows_verbose(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger(SPAN_LOGGER).level == logging.WARNING
        configure_logging(verbose=True)
        assert logging.getLogger(SPAN_LOGGER).level == logging.DEBUG

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
