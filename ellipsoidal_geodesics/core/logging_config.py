"""Logging configuration for the geodesic solvers.

Module loggers carry only a NullHandler and propagate, so records reach
whatever handlers the application installs. configure_logging attaches the
package's formatted stderr handler for scripts that have none.
"""

import logging
import sys
from typing import Optional, TextIO


PACKAGE_LOGGER = "ellipsoidal_geodesics"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger for a module of the geodesic package.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int, optional
        Logging level. None leaves the level to the parent loggers.

    Returns
    -------
    logging.Logger
        Logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send the package's log records to a stream.

    Parameters
    ----------
    level : int
        Logging level of the package logger.
    stream : file-like, optional
        Destination, stderr by default.

    Returns
    -------
    logging.Logger
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
