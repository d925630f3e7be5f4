"""Tests for logging setup."""

import logging

import pytest

from ronin_export.config import LoggingConfig
from ronin_export.utils import HTTP_LOGGERS, setup_logging


@pytest.fixture(autouse=True)
def restore_logger_levels():
    """Undo level changes made to the package and HTTP loggers."""
    names = ["ronin_export", *HTTP_LOGGERS]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestSetupLogging:
    """Test level selection for package and HTTP loggers."""

    def test_config_level_applied(self):
        level = setup_logging(LoggingConfig(level="warning"))

        assert level == logging.WARNING
        assert logging.getLogger("ronin_export").level == logging.WARNING

    def test_override_level_wins(self):
        level = setup_logging(LoggingConfig(level="ERROR"), level="INFO")

        assert level == logging.INFO
        assert logging.getLogger("ronin_export").level == logging.INFO

    def test_http_loggers_quieted_at_info(self):
        setup_logging(LoggingConfig(level="INFO"))

        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_http_loggers_verbose_at_debug(self):
        setup_logging(LoggingConfig(), level="DEBUG")

        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
