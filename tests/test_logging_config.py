"""
Tests for logging configuration helpers.
"""

import json
import logging
import sys

import pytest

from astromind.utils.logging_config import (
    StructuredFormatter,
    get_logger,
    setup_logging,
    temporary_log_level,
)


@pytest.fixture
def logger_name(request):
    name = f"astromind.tests.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_setup_logging_file_output(tmp_path, logger_name):
    log_file = tmp_path / "logs" / "console.log"
    logger = setup_logging(logger_name, level=logging.INFO, log_file=str(log_file), console=False)

    logger.info("Route found")
    logger.debug("hidden")
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text()
    assert "[INFO]" in text
    assert "Route found" in text
    assert "hidden" not in text


def test_setup_logging_replaces_handlers(logger_name):
    setup_logging(logger_name)
    logger = setup_logging(logger_name)
    assert len(logger.handlers) == 1


def test_structured_file_output(tmp_path, logger_name):
    log_file = tmp_path / "structured.log"
    logger = setup_logging(logger_name, log_file=str(log_file), console=False, structured=True)

    logger.warning("Ticker halted", extra={"extra": {"ticks": 12}})
    for handler in logger.handlers:
        handler.flush()

    record = json.loads(log_file.read_text().strip())
    assert record["level"] == "WARNING"
    assert record["message"] == "Ticker halted"
    assert record["ticks"] == 12


def test_structured_formatter_includes_exception():
    try:
        raise ValueError("bad radius")
    except ValueError:
        record = logging.getLogger("x").makeRecord(
            "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    data = json.loads(StructuredFormatter().format(record))
    assert "bad radius" in data["exception"]


def test_get_logger_level_override(logger_name):
    assert get_logger(logger_name, logging.ERROR).level == logging.ERROR


def test_temporary_log_level(logger_name):
    logger = get_logger(logger_name, logging.WARNING)
    with temporary_log_level(logger_name, logging.DEBUG):
        assert logger.level == logging.DEBUG
    assert logger.level == logging.WARNING
