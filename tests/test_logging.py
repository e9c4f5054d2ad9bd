from __future__ import annotations

import json
import logging
import sys

from speckit_core.logging import JSONFormatter, get_logger, setup_logging


class TestLogging:
    def test_setup_installs_single_handler(self):
        logger = setup_logging("info")
        again = setup_logging("debug")

        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_unknown_level_defaults_to_warning(self):
        assert setup_logging("chatty").level == logging.WARNING

    def test_child_logger_namespace(self):
        assert get_logger("templates.installer").name == "speckit.templates.installer"

    def test_json_formatter(self):
        logger = setup_logging("INFO", json_output=True)
        record = logging.LogRecord(
            "speckit.test", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )
        line = logger.handlers[0].format(record)

        data = json.loads(line)
        assert data["msg"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "speckit.test"

    def test_numeric_level(self):
        assert setup_logging(logging.ERROR).level == logging.ERROR

    def test_format_follows_latest_call(self):
        logger = setup_logging("INFO")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

        setup_logging("INFO", json_output=True)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

        setup_logging("INFO")
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_json_formatter_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "speckit.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exc"]
