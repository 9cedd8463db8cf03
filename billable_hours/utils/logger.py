# File: billable_hours/utils/logger.py
"""
Logging for Billable Hours.

Log records go to stderr and to a daily file; stdout carries only the
report itself.
"""

import logging
import os
import sys
from pathlib import Path
from datetime import datetime

LOG_DIR_ENV = "BILLABLE_HOURS_LOG_DIR"
LOG_LEVEL_ENV = "BILLABLE_HOURS_LOG_LEVEL"

CONSOLE_FORMAT = logging.Formatter(
    '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s', datefmt='%H:%M:%S'
)
FILE_FORMAT = logging.Formatter(
    '%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


def setup_logger(name: str = "billable_hours", level: int = logging.INFO) -> logging.Logger:
    """Return ``name``'s logger, attaching the console and file handlers once.

    BILLABLE_HOURS_LOG_LEVEL (e.g. ``DEBUG``) overrides ``level`` for the
    console; the file always receives DEBUG. BILLABLE_HOURS_LOG_DIR moves the
    log files out of ``logs/``.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    override = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "").upper())
    if isinstance(override, int):
        level = override

    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(CONSOLE_FORMAT)

    log_dir = Path(os.getenv(LOG_DIR_ENV, "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"billable_hours_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(FILE_FORMAT)

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)
    return logger


class LoggerMixin:
    """Gives a class a ``logger`` named after it."""

    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            self._logger = setup_logger(self.__class__.__name__)
        return self._logger
