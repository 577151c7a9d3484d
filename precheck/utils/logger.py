"""Logging configuration for precheck."""

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "PRECHECK_LOG_LEVEL"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to the PRECHECK_LOG_LEVEL environment variable, then INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if no handlers exist
    if not logger.handlers:
        level_name = (level or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
        log_level = getattr(logging, level_name, logging.INFO)
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        logger.propagate = False

    return logger


def set_level(logger: logging.Logger, level: str) -> None:
    """Change the level of a logger and its handlers."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)
    for handler in logger.handlers:
        handler.setLevel(log_level)
