"""Structured logging for registry events (register, unregister, clear)."""

import logging
import sys
from typing import Union


def get_logger(name: str, level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Return a configured logger for observability; an existing level is left alone."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
        if logger.level == logging.NOTSET:
            logger.setLevel(level)
    return logger
