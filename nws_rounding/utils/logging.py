"""Logging configuration for the NWS rounding engine."""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from nws_rounding.config import LOG_LEVEL, LOG_FORMAT


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    rich_output: bool = False,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        rich_output: Log through Rich on stderr, keeping stdout free for
                     rendered tables and panels
    """
    level = level or LOG_LEVEL
    format_string = format_string or LOG_FORMAT

    if rich_output:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
        )
        format_string = "%(name)s: %(message)s"
    else:
        handler = logging.StreamHandler(sys.stdout)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[handler],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
