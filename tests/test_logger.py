"""Tests for the logging setup."""

import logging

import utils.logger as logger_module
from utils.logger import configure_logging, get_logger


class TestConfigureLogging:

    def test_handler_added_once(self):
        first = configure_logging("INFO")
        second = configure_logging("DEBUG")
        root = logging.getLogger()
        assert first is second
        assert root.handlers.count(first) == 1
        assert root.level == logging.DEBUG
        configure_logging("INFO")

    def test_polling_loggers_are_quiet(self):
        configure_logging("DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("telegram.ext.Updater").level == logging.WARNING
        configure_logging("INFO")

    def test_get_logger_configures_on_first_use(self, monkeypatch):
        monkeypatch.setattr(logger_module, "_handler", None)
        log = get_logger("lessons.test")
        assert log.name == "lessons.test"
        assert logger_module._handler is not None
        logging.getLogger().removeHandler(logger_module._handler)
