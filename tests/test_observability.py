"""
Tests for logging setup.
"""

import io
import json
import logging
import sys

import pytest

from toolgate.observability import JSONFormatter, configure_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_text_format(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)

        logging.getLogger("toolgate.test").info("[dispatcher] search completed")

        line = stream.getvalue().strip()
        assert " - toolgate.test - INFO - [dispatcher] search completed" in line

    def test_json_format(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("DEBUG", json_format=True, stream=stream)

        logging.getLogger("toolgate.test").debug("hello")

        entry = json.loads(stream.getvalue())
        assert entry["level"] == "debug"
        assert entry["logger"] == "toolgate.test"
        assert entry["message"] == "hello"
        assert "timestamp" in entry

    def test_level_filters(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("WARNING", stream=stream)

        logging.getLogger("toolgate.test").info("hidden")

        assert stream.getvalue() == ""

    def test_repeated_calls_do_not_duplicate(self, restore_root_logger):
        stream = io.StringIO()
        configure_logging("INFO", stream=stream)
        configure_logging("INFO", stream=stream)

        logging.getLogger("toolgate.test").info("once")

        assert stream.getvalue().count("once") == 1

    def test_httpx_quieted(self, restore_root_logger):
        configure_logging("DEBUG", stream=io.StringIO())

        assert logging.getLogger("httpx").level == logging.WARNING


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_exception_included(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.getLogger("x").makeRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), exc_info=sys.exc_info()
            )

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "failed"
        assert "ValueError: boom" in entry["exception"]
