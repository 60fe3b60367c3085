"""
Logging configuration for the PDFGEN_LOG_LEVEL levels.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import colorama
from colorama import Fore, Style

colorama.init(autoreset=True)

LOGGER_NAME = "pdfgen"


class LogLevel(str, Enum):
    """Log level enumeration."""

    MINIMAL = "minimal"  # Only errors and warnings
    NORMAL = "normal"  # INFO, WARNING, ERROR
    DETAILED = "detailed"  # DEBUG, INFO, WARNING, ERROR
    FULL = "full"  # All logs with full context


class ColoredFormatter(logging.Formatter):
    """Colored log formatter."""

    COLORS = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.RED + Style.BRIGHT,
    }

    def format(self, record):
        """Format log record with colors."""
        # Work on a copy so file handlers sharing the record see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, "")
        record.levelname = f"{log_color}{record.levelname}{Style.RESET_ALL}"
        return super().format(record)


def resolve_log_level(value: Optional[str]) -> LogLevel:
    """
    Map a user-supplied level name to a LogLevel.

    Unknown or empty values fall back to NORMAL.
    """
    if not value:
        return LogLevel.NORMAL
    try:
        return LogLevel(value.strip().lower())
    except ValueError:
        return LogLevel.NORMAL


def setup_logging(
    level: LogLevel = LogLevel.NORMAL,
    log_to_file: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        level: Log level
        log_to_file: Whether to log to file
        log_file: Log file path

    Returns:
        Configured logger
    """
    # Determine actual log level
    if level == LogLevel.DETAILED or level == LogLevel.FULL:
        log_level = logging.DEBUG
    elif level == LogLevel.NORMAL:
        log_level = logging.INFO
    else:  # MINIMAL
        log_level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    # stdout is left alone; diagnostics belong on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if level == LogLevel.FULL:
        console_format = ColoredFormatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
        )
    else:
        console_format = ColoredFormatter("%(levelname)-8s | %(message)s")

    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    if log_to_file:
        if log_file is None:
            log_file = "logs/pdfgen.log"

        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file

        file_format = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)
        # File gets everything even when the console is quieter
        logger.setLevel(logging.DEBUG)

    return logger
