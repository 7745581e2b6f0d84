"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from isoperiod.config.logging import HANDLER_NAME, LOGGER_NAME, configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_human_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        structlog.get_logger("isoperiod.test").warning("hello world", key="val")
        err = capfd.readouterr().err
        assert "hello world" in err
        assert "key" in err

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("isoperiod.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "isoperiod.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("isoperiod.services.period").debug("Rejected period 'PY'")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Rejected period 'PY'"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "isoperiod.services.period"

    def test_third_party_debug_is_suppressed(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("somelib").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count(HANDLER_NAME) == 1

    def test_other_root_handlers_survive(self) -> None:
        other = logging.NullHandler()
        logging.getLogger().addHandler(other)
        configure_logging(verbose=False, log_json=False)
        assert other in logging.getLogger().handlers

    def test_timestamps_are_utc(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("isoperiod.test").warning("tick")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["timestamp"].endswith("Z")
