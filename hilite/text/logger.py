"""
Module: hilite.text.logger

Shared logger factory. Every module asks for its logger by name so that the
level can be tuned from the environment without touching call sites.
"""

import logging
import os
import sys
from logging import Logger
from typing import Optional, Union

LOG_LEVEL_ENV = "HILITE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TextLogger:
    @staticmethod
    def level_from_env(default: int = logging.WARNING) -> int:
        name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
        if not name:
            return default
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else default

    @staticmethod
    def get_logger(name: str, level: Optional[Union[int, str]] = None) -> Logger:
        """Return a named logger with a single stderr handler attached."""
        logger = logging.getLogger(name)
        if level is None:
            level = TextLogger.level_from_env()
        logger.setLevel(level)

        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

        return logger


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> Logger:
    return TextLogger.get_logger(name, level)
