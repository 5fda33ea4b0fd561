"""
File for logging

All tonelli loggers live under the "tonelli" logger. It carries the single stdout handler and the default level, and
module loggers inherit both through propagation.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from tonelli.core.formats import LOGGING

__all__ = ["get_logger"]


def _package_logger() -> logging.Logger:
    """
    Returns the "tonelli" logger, attaching the console handler on first use
    """
    root = logging.getLogger(LOGGING.ROOT)
    if not root.handlers:
        root.setLevel(getattr(logging, LOGGING.DEFAULT_LEVEL))
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(logging.Formatter(LOGGING.FORMAT))
        root.addHandler(handler)
    return root


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Get a logger in the tonelli hierarchy.

    Args:
        name: Logger name (typically __name__ from calling module). Names outside "tonelli" are placed under it.
        log_level: Optional level for this logger only. Unset loggers inherit the package level.
        log_file: Optional path to log file for persistent logging

    Returns:
        Logger whose records reach the package console handler
    """
    _package_logger()
    if name != LOGGING.ROOT and not name.startswith(LOGGING.ROOT + "."):
        name = f"{LOGGING.ROOT}.{name}"
    logger = logging.getLogger(name)

    if log_level is not None:
        logger.setLevel(getattr(logging, log_level.upper()))

    if log_file:
        log_file = Path(log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == os.path.abspath(log_file) for h in logger.handlers
        )
        if not already_attached:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(LOGGING.FORMAT))
            logger.addHandler(file_handler)

    return logger
