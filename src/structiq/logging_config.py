"""
Logging configuration for StructIQ.

Library modules only create loggers; handlers are installed by the CLI
(or an embedding application) through ``configure_logging``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module under the ``structiq`` namespace."""
    if not name.startswith("structiq"):
        name = f"structiq.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Args:
        level: Logging level for the ``structiq`` logger

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("structiq")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
