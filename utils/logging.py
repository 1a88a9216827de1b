"""Logging utilities for TabPrep.

All modules log through the standard library. The CLI configures the root
logger once; library callers keep whatever configuration they already have.
"""

import logging
import sys
from typing import Optional, Union

from .constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: Union[int, str, None], verbose: bool = False) -> int:
    """Turn a level name or number into a logging level.

    An explicit level wins over ``verbose``. Unknown names fall back to
    DEFAULT_LOG_LEVEL.
    """
    if level is None:
        level = "DEBUG" if verbose else DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, int):
        return resolved
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def setup_logging(verbose: bool = False, level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger for command-line runs.

    Logs go to stderr because stdout carries JSON payloads. Warnings
    raised through the ``warnings`` module (openpyxl reports workbook
    oddities this way) are routed into logging too. Safe to call more
    than once.

    Args:
        verbose: If True, log at DEBUG
        level: Optional explicit level, name or number
    """
    logging.basicConfig(
        level=resolve_log_level(level, verbose),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (pass ``__name__``)."""
    return logging.getLogger(name)
