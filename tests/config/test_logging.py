"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from patternctl.config.logging import configure_logging

pytestmark = pytest.mark.usefixtures("_restore_logging")


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("patternctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("patternctl").level == logging.WARNING

    def test_pluggy_kept_quiet(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("pluggy").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("patternctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "patternctl.test"
        assert "timestamp" in parsed

    def test_stdlib_records_are_rendered(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("patternctl.domain.state").debug("Gumball machine %s -> %s", "a", "b")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Gumball machine a -> b"
        assert parsed["level"] == "debug"

    def test_nothing_on_stdout(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        logging.getLogger("patternctl.test").warning("to stderr")
        captured = capfd.readouterr()
        assert captured.out == ""
        assert "to stderr" in captured.err
