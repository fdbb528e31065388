"""
Logger Setup

Console logging, plus a rotating log file when a log directory is configured.
Timestamps are rendered in the configured timezone.
"""

import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from typing import Optional

import pytz

from nopol.config import NopolConfig, get_config


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class TimezoneFormatter(logging.Formatter):
    """Formatter with timestamps in a fixed timezone"""

    def __init__(self, fmt=None, datefmt=None, tz=None):
        super().__init__(fmt, datefmt)
        self.tz = tz

    def formatTime(self, record, datefmt=None):
        dt = datetime.fromtimestamp(record.created, self.tz)
        return dt.strftime(datefmt) if datefmt else dt.isoformat()


def configure_logger(
    name: str = "nopol",
    config: Optional[NopolConfig] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 1,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        name: Logger name, also the log file name
        config: Settings to use (default: global config)
        max_bytes: Maximum size of one log file
        backup_count: Number of rotated files to keep

    Returns:
        Configured logger
    """
    config = config or get_config()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    formatter = TimezoneFormatter(
        fmt=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        tz=pytz.timezone(config.timezone),
    )

    logger = logging.getLogger(name)

    # Avoid duplicate handlers on repeated setup
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.log_dir:
        log_file = os.path.abspath(os.path.join(config.log_dir, f"{name}.log"))
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(level)
    logger.propagate = False

    return logger
