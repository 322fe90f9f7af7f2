"""Centralized logging configuration using loguru."""

import sys

from loguru import logger

from stockr.config import settings

# colorize=True forces ANSI colors even without a TTY
logger.remove()
logger.add(sys.stderr, level=settings.log_level.upper(), colorize=True)

__all__ = ["logger"]
