"""Logging configuration and utilities."""

import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
PACKAGE_LOGGER = "hutupy"

def get_logger(
    name: str,
    level: str = "INFO",
    log_file: Optional[str] = None
) -> logging.Logger:
    """Get configured logger instance.

    Handlers are attached only the first time a name is requested, so
    modules can call this at import time without duplicating output.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(level_value(level))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        add_file_handler(logger, log_file)

    return logger

def add_file_handler(logger: logging.Logger, log_file: str) -> None:
    """Also write a logger's records to ``log_file``, with source location.

    Does nothing if the logger already writes to that file.
    """
    log_path = Path(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and \
                handler.baseFilename == os.path.abspath(log_file):
            return
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

def level_value(level: str) -> int:
    """Numeric value of a level name such as ``"info"``.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)

def package_loggers() -> List[logging.Logger]:
    """All loggers created so far whose name starts with ``hutupy``."""
    return [
        log for name, log in sorted(logging.Logger.manager.loggerDict.items())
        if name.startswith(PACKAGE_LOGGER) and isinstance(log, logging.Logger)
    ]

def configure_package_logging(level: str, log_file: Optional[str] = None) -> None:
    """Apply one level, and optionally one log file, to every package logger."""
    value = level_value(level)
    for log in package_loggers():
        log.setLevel(value)
        if log_file:
            add_file_handler(log, log_file)

# Default logger
logger = get_logger(PACKAGE_LOGGER)
