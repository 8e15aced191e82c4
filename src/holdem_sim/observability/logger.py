"""Logging configuration for the Hold'em simulator."""

import logging
import sys
from typing import Union

from rich.console import Console
from rich.logging import RichHandler

from holdem_sim import config

LOGGER_NAME = "holdem_sim"


def setup_logging(
    level: Union[int, str] = config.LOG_LEVEL,
    format_style: str = "rich",
) -> logging.Logger:
    """
    Set up logging for the simulator's loggers.

    Args:
        level: Logging level, as a number or a name like "DEBUG"
        format_style: "rich" for a Rich console handler, "simple" for plain text

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level}")
        level = numeric

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)

    # Remove existing handlers
    root_logger.handlers.clear()

    if format_style == "rich":
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))
    elif format_style == "simple":
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
    else:
        raise ValueError(f"Unknown log format: {format_style}")

    handler.setLevel(level)
    root_logger.addHandler(handler)
    root_logger.propagate = False

    return root_logger
