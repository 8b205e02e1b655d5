"""
Logging setup for the compliance workbook parser.

Provides centralized configuration with:
- Rotating file output
- Coloured console output
- Level taken from LoggingConfig (LOG_LEVEL)

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here by the command line entry point.
"""

import logging
import logging.handlers
import sys
from typing import Optional

from .config import get_logging_config


class ColoredFormatter(logging.Formatter):
    """Console formatter with coloured level names."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        record = logging.makeLogRecord(record.__dict__)
        log_color = self.COLORS.get(record.levelname, "")
        record.levelname = f"{log_color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(
    name: Optional[str] = "compliance_parser",
    level: Optional[str] = None,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configures a logger for the application.

    Args:
        name: Logger name (the package logger by default)
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_to_file: Write to the rotating log file
        log_to_console: Write to stderr

    Returns:
        logging.Logger: The configured logger
    """
    config = get_logging_config()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or config.level).upper(), logging.INFO))

    # Reconfiguring replaces earlier handlers
    logger.handlers.clear()

    if log_to_file and config.file_path:
        config.file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColoredFormatter(config.format))
        logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def configure_third_party_loggers():
    """Quiets noisy third-party libraries."""
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)
