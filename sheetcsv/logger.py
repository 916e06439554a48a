"""
Unified Logging Module
======================

Single place to configure and fetch loggers for sheetcsv.

Every record goes to stderr: standard output may be carrying the CSV data
stream, so status and diagnostics must never be written there.

Usage:
    from sheetcsv.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Converting sheet '%s'", sheet_name)
    logger.warning("Row %d has %d columns", row_number, length)
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LEVEL = logging.INFO
ROOT_LOGGER_NAME = "sheetcsv"

# Global flag to track if the project logger has been configured
_root_configured = False


def _configure_root_logger() -> None:
    """
    Attach the stderr handler to the project logger.

    Runs once; the ``_root_configured`` flag guards against duplicate handlers.
    """
    global _root_configured
    if _root_configured:
        return

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(DEFAULT_LEVEL)
    root_logger.addHandler(console_handler)
    root_logger.propagate = False

    _root_configured = True


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return a configured logger.

    Args:
        name: logger name, usually the calling module's ``__name__``
        level: optional level; the project default (INFO) applies otherwise

    Example:
        logger = get_logger(__name__)
        logger.info("... processed %d rows", row_count)
    """
    _configure_root_logger()

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_level(level: Union[int, str], logger_name: Optional[str] = None) -> None:
    """
    Set the level of one logger, or of the whole project when no name is given.

    Example:
        set_level(logging.DEBUG)                      # all sheetcsv modules
        set_level("DEBUG", "sheetcsv.converter")      # just the pipeline
    """
    _configure_root_logger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(logger_name or ROOT_LOGGER_NAME)
    logger.setLevel(level)
