"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from io import StringIO

import structlog

from shapekit.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False, stream=StringIO())
        assert logging.getLogger("shapekit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False, stream=StringIO())
        assert logging.getLogger("shapekit").level == logging.WARNING

    def test_json_mode_output(self) -> None:
        buf = StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)
        structlog.get_logger("shapekit.test").warning("json test", answer=42)
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "shapekit.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(self) -> None:
        buf = StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)
        logging.getLogger("shapekit.services.base").debug("validate_rectangle succeeded")
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "validate_rectangle succeeded"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "shapekit.services.base"

    def test_debug_suppressed_when_not_verbose(self) -> None:
        buf = StringIO()
        configure_logging(verbose=False, log_json=True, stream=buf)
        logging.getLogger("shapekit.services.base").debug("hidden")
        assert buf.getvalue() == ""

    def test_json_mode_structures_tracebacks(self) -> None:
        buf = StringIO()
        configure_logging(verbose=True, log_json=True, stream=buf)
        try:
            raise ValueError("bad width")
        except ValueError:
            logging.getLogger("shapekit.test").exception("parse failed")
        parsed = json.loads(buf.getvalue().strip())
        assert parsed["event"] == "parse failed"
        assert parsed["exception"][0]["exc_type"] == "ValueError"
        assert parsed["exception"][0]["exc_value"] == "bad width"

    def test_replaces_existing_root_handlers(self) -> None:
        configure_logging(stream=StringIO())
        configure_logging(stream=StringIO())
        assert len(logging.getLogger().handlers) == 1
