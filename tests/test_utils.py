"""Tests for logging setup and structured formatting."""

import json
import logging

from callwrap.utils import StructuredFormatter, setup_logging


def _record(message="hello", **extra):
    record = logging.LogRecord("callwrap.wrapper", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_formats_json(self):
        data = json.loads(StructuredFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "callwrap.wrapper"
        assert data["message"] == "hello"
        assert data["timestamp"].endswith("Z")

    def test_includes_callable_name(self):
        data = json.loads(StructuredFormatter().format(_record(callable_name="Math::square")))
        assert data["callable"] == "Math::square"


class TestSetupLogging:
    def test_sets_level_and_handlers(self):
        logger = setup_logging(log_level="debug", log_format="pretty")
        assert logger.name == "callwrap"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file_structured(self, tmp_path):
        log_file = tmp_path / "logs" / "callwrap.log"
        logger = setup_logging(log_level="INFO", log_format="structured", log_file=log_file)
        logging.getLogger("callwrap.test").info("written")
        for handler in logger.handlers:
            handler.flush()

        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "written"

    def test_closes_replaced_file_handlers(self, tmp_path):
        logger = setup_logging(log_format="structured", log_file=tmp_path / "first.log")
        file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))

        logger = setup_logging(log_format="structured")
        assert file_handler.stream is None
        assert file_handler not in logger.handlers
