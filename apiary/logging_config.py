"""Logging configuration for Apiary."""

import logging
import sys


LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# httpx logs every request at INFO; the executor already logs one line per exchange
QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logging for the API server.

    Args:
        level: Logging level for Apiary's own loggers (default: INFO)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root_logger.level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return a logger for an Apiary module."""
    return logging.getLogger(name)
