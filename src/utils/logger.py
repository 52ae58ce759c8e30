"""Logging setup for the engine and the replay CLI."""

import logging
from typing import Optional, Union

ROOT_LOGGER = "src"
LOG_FORMAT = "%(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Send this package's log records to stderr at ``level``.

    Only the package logger is touched, so callers embedding the engine keep
    their own root configuration. Calling it again replaces the handler.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Loggers live under the package logger so ``configure_logging`` reaches them."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
