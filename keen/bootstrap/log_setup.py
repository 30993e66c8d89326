"""
bootstrap/log_setup.py - Logging setup.
"""

from __future__ import annotations
from typing import Optional
import json
import logging
import sys

from .config import KeenConfig


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
    fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
) -> logging.Logger:
    """
    Configure logging for the ``keen`` logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs

    Returns:
        The configured ``keen`` logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = JSONFormatter() if json_format else logging.Formatter(fmt)

    keen_logger = logging.getLogger("keen")
    keen_logger.setLevel(log_level)

    # Replace handlers from a previous call
    for handler in list(keen_logger.handlers):
        keen_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    keen_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        keen_logger.addHandler(file_handler)

    return keen_logger


def setup_logging_from_config(config: KeenConfig) -> logging.Logger:
    """Configure logging from the root config; ``debug`` overrides the level."""
    return setup_logging(
        level="DEBUG" if config.debug else config.logging.level,
        log_file=config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )
