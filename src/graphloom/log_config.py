# graphloom/log_config.py
"""Logging configuration for graphloom using Loguru.

Every module logs through the shared ``logger`` re-exported here, so a single
call to :func:`configure_logging` controls the output of the whole client.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures the Loguru logger used by graphloom.

    Removes existing handlers and installs a single one with the given level
    and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "graphloom.log").
    """
    logger.remove()
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        diagnose=False,
    )
    logger.debug(f"graphloom logging configured with level={level.upper()}")
