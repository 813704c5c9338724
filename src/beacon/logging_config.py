import logging.config
import os
import sys
from typing import Optional

from rich.console import Console

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(level: Optional[str]) -> int:
    """Map a level name to its logging constant, warning on unknown names."""
    level_str = (level or "INFO").upper()
    if level_str not in LOG_LEVELS:
        print(
            f"Warning: Invalid log level '{level}'. "
            f"Valid values: {', '.join(LOG_LEVELS.keys())}. Using INFO.",
            file=sys.stderr,
        )
        return logging.INFO
    return LOG_LEVELS[level_str]


def setup_logging(level: Optional[str] = None, log_dir: Optional[str] = None):
    """
    Configures logging for the application.

    Reads configuration from arguments, then environment variables:
    - LOG_DIR: Directory for log files (default: "logs")
    - LOG_LEVEL: Logging level (default: "INFO")
      Valid values: DEBUG, INFO, WARN, WARNING, ERROR, CRITICAL (case-insensitive)

    Creates the log directory if it doesn't exist, and sets up
    file-based logging with console output.
    """
    log_dir = log_dir or os.getenv("LOG_DIR", "logs")
    log_file_path = os.path.join(log_dir, "beacon.log")
    log_level = resolve_log_level(level or os.getenv("LOG_LEVEL"))

    os.makedirs(log_dir, exist_ok=True)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(message)s",
            },
            "detailed": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            },
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": log_file_path,
                "maxBytes": 1024 * 1024 * 5,  # 5 MB
                "backupCount": 5,
                "formatter": "detailed",
                "level": log_level,
            },
            "rich": {
                "class": "rich.logging.RichHandler",
                "rich_tracebacks": True,
                "formatter": "default",
                "console": Console(file=sys.stderr),
                "level": log_level,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["file", "rich"],
        },
    }

    logging.config.dictConfig(logging_config)
    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured successfully. Level: {logging.getLevelName(log_level)}"
    )
