"""Logging configuration for the cashii CLI."""

import logging
from typing import Union

import click

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Write log records to click's current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def setup_logging(level: Union[int, str] = logging.WARNING, logger_name: str = "cashii") -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling it again only changes the level.

    Args:
        level: Log level name or number
        logger_name: Name of the logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
