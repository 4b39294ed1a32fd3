"""
Logging configuration.

Provides consistent console and file logging across FertiScope modules.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: str = "INFO", log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(name)s] %(message)s'
    ))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
        ))
        root_logger.addHandler(file_handler)


def setup_logging_from_config(config=None) -> None:
    """Configure logging from the global (or given) :class:`Config`."""
    from fertiscope.config import get_config

    config = config or get_config()
    setup_logging(config.log_level, config.log_file_path)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
