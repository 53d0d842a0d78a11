"""
Logging setup for the cavelink modules.

Every module logs through ``get_logger(__name__)``, which hangs its logger
under the ``cavelink`` package logger. Nothing is printed until either the
embedding application configures logging or ``setup_logger`` attaches a
stream handler to the package logger.
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "cavelink"
DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def setup_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the ``cavelink`` package logger.

    Parameters
    ----------
    level : int, optional
        Level for both the logger and its handler. Defaults to logging.INFO.
    format_string : str, optional
        Format for log records. Defaults to ``DEFAULT_FORMAT``.
    stream : file-like, optional
        Where records are written. Defaults to standard output.

    Returns
    -------
    logging.Logger
        The package logger. Calling again returns it unchanged, without a
        second handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    logger.setLevel(level)
    logger.addHandler(handler)
    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Return a child of the package logger for ``module_name``."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
