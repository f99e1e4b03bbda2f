"""Logging configuration for data-validator.

Sends application logs to stderr so that stdout carries only validation
reports.
"""

import logging
import sys
from typing import Literal

from data_validator.settings import get_settings

# Third-party loggers that should never drown out a report
NOISY_LOGGERS = [
    "markdown_it",
    "asyncio",
]


def suppress_noisy_loggers() -> None:
    """Raise noisy third-party loggers to WARNING and drop their handlers."""
    for logger_name in NOISY_LOGGERS:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.handlers.clear()


def configure_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None,
) -> None:
    """Configure application logging.

    Sets up:
    - A single stderr handler at the configured level
    - The data_validator logger at the same level
    - Third-party library logs suppressed to WARNING+

    Args:
        level: Override log level (defaults to settings.log_level)
    """
    settings = get_settings()
    log_level = level or ("DEBUG" if settings.debug else settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handler level
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level))
    console_handler.setFormatter(
        logging.Formatter(
            "%(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root_logger.addHandler(console_handler)

    logging.getLogger("data_validator").setLevel(getattr(logging, log_level))

    suppress_noisy_loggers()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


# Configure logging on module import
configure_logging()
