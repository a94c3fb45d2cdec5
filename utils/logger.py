"""
utils/logger.py
---------------
Logging setup for LessonBot.
Modules call `get_logger(__name__)`; main.py calls `configure_logging()`
first so the level from LOG_LEVEL applies before the bot starts.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO during long polling.
_QUIET_LOGGERS = ("httpx", "telegram.ext.Updater")

_handler: logging.Handler | None = None


def configure_logging(level: str | int = LOG_LEVEL) -> logging.Handler:
    """
    Attach the stdout handler to the root logger and set its level.

    Calling it again only changes the level; the handler is added once.

    Returns:
        The stdout handler owned by this module.
    """
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return _handler


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures logging with defaults on first use."""
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
