"""Tests for the logging setup."""

import logging
from collections.abc import Generator

import pytest
from colorlog import ColoredFormatter

from aioisstracker.logging_config import HANDLER_NAME, NOISY_LOGGERS, setup_logging


@pytest.fixture(name="root_logger")
def restore_root_logger() -> Generator[logging.Logger, None, None]:
    """Restore the logging levels and handlers after the test."""
    root_logger = logging.getLogger()
    levels = {
        name: logging.getLogger(name).level for name in ("", *NOISY_LOGGERS)
    }
    handlers = list(root_logger.handlers)
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging(root_logger: logging.Logger) -> None:
    """Test a colored handler is installed and aiohttp is quiet."""
    handler = setup_logging()
    assert handler in root_logger.handlers
    assert handler.name == HANDLER_NAME
    assert isinstance(handler.formatter, ColoredFormatter)
    assert root_logger.level == logging.INFO
    assert logging.getLogger("aiohttp").level == logging.WARNING


def test_setup_logging_debug(root_logger: logging.Logger) -> None:
    """Test debug logging reaches every logger and adds no second handler."""
    handler = setup_logging()
    assert setup_logging(debug=True) is handler
    assert [h for h in root_logger.handlers if h.name == HANDLER_NAME] == [handler]
    assert root_logger.level == logging.DEBUG
    assert logging.getLogger("aiohttp").getEffectiveLevel() == logging.DEBUG
