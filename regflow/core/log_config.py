"""Logging setup for the registration service."""

from __future__ import annotations

import logging

LOGGER_NAME = "regflow"
HANDLER_NAME = "regflow-stream"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger, idempotently."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(handler.get_name() == HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
