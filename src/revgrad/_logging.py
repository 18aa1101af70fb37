"""
Package logger setup.

All modules log through children of the ``revgrad`` logger
(``logging.getLogger(__name__)``). On import the package logger only gets a
`logging.NullHandler` and the level from the runtime config; output is left
to the application. `configure_logging` attaches a stream handler with the
``[time][level][name] message`` format for scripts and interactive use.
"""

import logging
from typing import Optional, TextIO

from ._config import get_config

PACKAGE_LOGGER_NAME = "revgrad"
LOG_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] %(message)s"

_stream_handler: Optional[logging.Handler] = None


def apply_log_level(level_name: str) -> None:
    """Set the package logger level from a level name such as ``"DEBUG"``."""
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)


def get_logger() -> logging.Logger:
    """Return the package logger with a NullHandler and the configured level."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    apply_log_level(get_config().log_level)
    return logger


def configure_logging(
    level: Optional[str] = None, stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Send package log records to a stream.

    Parameters
    ----------
    level : str, optional
        Level name to apply. Defaults to the runtime config's level.
    stream : TextIO, optional
        Destination stream. Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The package logger. Calling this again replaces the stream handler
        added by a previous call instead of adding a second one.
    """
    global _stream_handler
    logger = get_logger()
    if _stream_handler is not None:
        logger.removeHandler(_stream_handler)
    _stream_handler = logging.StreamHandler(stream)
    _stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_stream_handler)
    if level is not None:
        apply_log_level(level)
    return logger
