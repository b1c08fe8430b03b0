"""Console logging setup for command-line runs."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Route ``greenhouse_registry`` loggers to a rich console handler."""
    logger = logging.getLogger("greenhouse_registry")
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, markup=False))
    return logger
