"""Logging setup for the fitocrat CLI.

Logs go to stderr so that stdout carries only command output.
"""

import logging
import os
import sys

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Send fitocrat logs to stderr at ``level`` (default: $LOG_LEVEL or WARNING)."""
    level = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))

    logger = logging.getLogger("fitocrat")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    logger.debug("Logger initialised level=%s", level)
    return logger
