"""
Centralized logging utilities for consistent logging configuration across the client
"""

import logging
from typing import Optional


DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger instance

    Args:
        name: Logger name (typically __name__ from calling module)
        level: Optional logging level (defaults to None to use root logger level)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def setup_logging(level: int = logging.INFO, format_string: Optional[str] = None):
    """
    Configure application-wide logging

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
    """
    if format_string is None:
        format_string = DEFAULT_FORMAT

    logging.basicConfig(
        level=level,
        format=format_string,
        force=True  # Override any existing configuration
    )

    # httpx logs full request URLs at INFO, which would include access tokens
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
