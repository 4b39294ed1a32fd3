"""Shared helpers for FertiScope."""

from fertiscope.utils.values import is_present, is_positive
from fertiscope.utils.logging import setup_logging, setup_logging_from_config, get_logger

__all__ = [
    "is_present",
    "is_positive",
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
]
