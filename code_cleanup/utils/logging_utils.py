"""
Centralized logging utilities for consistent logging configuration across the application
"""

import logging
import sys
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ["httpx", "httpcore", "google_genai", "mcp.server.lowlevel.server"]


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


def setup_logging(level: Union[int, str] = logging.INFO, format_string: Optional[str] = None):
    """
    Configure application-wide logging

    Logs always go to stderr: on the stdio transport stdout belongs to the
    MCP protocol stream.

    Args:
        level: Logging level or level name (default: INFO)
        format_string: Custom format string (optional)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if format_string is None:
        format_string = DEFAULT_FORMAT

    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        force=True  # Override any existing configuration
    )

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
