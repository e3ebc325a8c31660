"""Logging configuration shared by the desktop and web front ends."""

import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "PROFIT_CALCULATOR_LOG_LEVEL"


def setup_logging(level=None):
    """Route loguru output to stderr at ``level``.

    When ``level`` is omitted the ``PROFIT_CALCULATOR_LOG_LEVEL`` environment
    variable is used, falling back to ``INFO``.
    """
    level = level or os.environ.get(LOG_LEVEL_ENV, "INFO")
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    return level.upper()
