"""
Logging utilities for the AutoML Natural Language prediction sample.

This module provides a consistent logging interface across all modules.
Console output goes to stderr so that stdout carries only prediction lines.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from config import DEFAULT_LOG_LEVEL, LOGGER_NAME


# Default log format
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(
    name: str = LOGGER_NAME,
    level: int = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Set up and return a configured logger.

    Args:
        name: Logger name (use __name__ for module-specific loggers)
        level: Logging level (logging.DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        format_string: Log message format
        console: Whether to log to console
        stream: Console stream (defaults to sys.stderr)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid adding handlers multiple times
    if logger.handlers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(format_string)

    # Console handler
    if console:
        console_handler = logging.StreamHandler(stream or sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # File handler
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Child loggers (e.g. 'automl_nl_predict.pipeline') propagate to the
    package logger configured by setup_logger().

    Args:
        name: Logger name or dotted suffix

    Returns:
        Logger instance
    """
    if name != LOGGER_NAME and not name.startswith(f'{LOGGER_NAME}.'):
        name = f'{LOGGER_NAME}.{name}'
    return logging.getLogger(name)
