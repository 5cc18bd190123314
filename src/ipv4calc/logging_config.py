"""
Logging configuration for ipv4calc.

Console logging goes to stderr so command output on stdout stays clean;
file logging is optional and rotated.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


class StructuredFormatter(logging.Formatter):
    """Pipe-separated formatter for easier log parsing."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'module_name'):
            record.module_name = record.module
        if not hasattr(record, 'function_name'):
            record.function_name = record.funcName
        return super().format(record)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    max_bytes: int = 1048576,  # 1MB
    backup_count: int = 3,
    enable_console: bool = True,
) -> logging.Logger:
    """
    Set up logging for ipv4calc.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path; file logging is off when None
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("ipv4calc")
    console_level = getattr(logging, level.upper(), logging.WARNING)
    # File handler always records DEBUG, so the logger must let it through
    logger.setLevel(logging.DEBUG if log_file else console_level)

    # Clear existing handlers
    logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(StructuredFormatter(
            fmt='%(asctime)s | %(levelname)-8s | %(name)-24s | %(module_name)-10s | '
                '%(function_name)-16s | %(lineno)-4d | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def configure_logging(
    debug: bool = False,
    log_file: str | None = None,
    level: str = "WARNING",
) -> logging.Logger:
    """
    Quick logging configuration for the CLI.

    Args:
        debug: Force DEBUG level
        log_file: Optional rotating log file
        level: Level to use when debug is off
    """
    return setup_logging(level="DEBUG" if debug else level, log_file=log_file)
