"""Tests for logging configuration."""

import io
import json

import structlog

from automata_lab.logging import configure_logging, get_logger


class TestGetLogger:
    """Tests for get_logger()."""

    def test_returns_configured_filtering_logger(self):
        configure_logging(level="warning")

        bound = get_logger("engine").bind()

        assert isinstance(bound, structlog.get_config()["wrapper_class"])

    def test_level_filter_and_json_output(self):
        stream = io.StringIO()
        configure_logging(level="warning", format_type="json", stream=stream)
        try:
            logger = get_logger("engine")
            logger.info("hidden")
            logger.warning("shown", automaton="Email Validator")
        finally:
            configure_logging()

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["event"] == "shown"
        assert entry["logger_name"] == "engine"
        assert entry["level"] == "warning"
