"""Tests for JSON formatters and configure_logging."""

from __future__ import annotations

import io
import json
import logging
import sys

import pytest

from conditional.config.models import LoggingConfig
from conditional.logging import configure_logging
from conditional.logging.formatters import CompactJSONFormatter, JSONFormatter


def make_record(**extra):
    record = logging.LogRecord(
        "conditional.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("conditional")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestJSONFormatter:
    def test_basic_fields(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "WARNING"
        assert data["logger"] == "conditional.test"
        assert data["message"] == "hello world"
        assert "timestamp" in data

    def test_extra_attributes_are_kept(self):
        record = make_record(structured_data={"predicate": "gt"})

        data = json.loads(JSONFormatter().format(record))

        assert data["structured_data"] == {"predicate": "gt"}
        assert "args" not in data
        assert "msg" not in data

    def test_unserialisable_values_use_repr(self):
        record = make_record(structured_data={"value": object()})
        data = json.loads(JSONFormatter().format(record))
        assert data["structured_data"]["value"].startswith("<object object")

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]

    def test_indent(self):
        output = JSONFormatter(indent=2).format(make_record())
        assert "\n" in output

    def test_compact(self):
        output = CompactJSONFormatter().format(make_record())
        assert ", " not in output
        assert json.loads(output)["message"] == "hello world"


class TestConfigureLogging:
    def test_text_format(self, clean_logger):
        stream = io.StringIO()

        logger = configure_logging(handler=logging.StreamHandler(stream))
        logging.getLogger("conditional.kernel").warning("using %s", "native")

        assert logger is clean_logger
        assert logger.level == logging.WARNING
        assert "WARNING conditional.kernel: using native" in stream.getvalue()

    def test_json_format(self, clean_logger):
        stream = io.StringIO()

        configure_logging(
            LoggingConfig(level="debug", format="json"),
            handler=logging.StreamHandler(stream),
        )
        logging.getLogger("conditional.comparator").debug("staged")

        data = json.loads(stream.getvalue())
        assert data["logger"] == "conditional.comparator"
        assert data["level"] == "DEBUG"

    def test_compact_format(self, clean_logger):
        stream = io.StringIO()

        configure_logging(
            LoggingConfig(format="compact"), handler=logging.StreamHandler(stream)
        )
        logging.getLogger("conditional.kernel").warning("using native")

        line = stream.getvalue()
        assert isinstance(clean_logger.handlers[-1].formatter, CompactJSONFormatter)
        assert ", " not in line
        assert json.loads(line)["message"] == "using native"

    def test_reconfiguring_replaces_handler(self, clean_logger):
        before = len(clean_logger.handlers)

        configure_logging()
        configure_logging()

        assert len(clean_logger.handlers) == before + 1
