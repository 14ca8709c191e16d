"""Logging configuration and setup for deferqueue."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

QUEUE_LOGGER_PREFIX = "deferqueue.queue"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    directory: str | Path | None = None,
    max_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """Configure root logger with a console handler and an optional file handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        directory: Directory for the rotating log file. No file is written when None.
        max_size_mb: Maximum size in MB before rotation.
        backup_count: Number of backup files to keep.
    """
    log_level = getattr(logging, level.upper())

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if directory is not None:
        log_dir = Path(directory)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / "deferqueue.log",
            maxBytes=max_size_mb * 1024 * 1024,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    logging.info(f"Logging initialized: level={level}, directory={directory}")


def get_queue_logger(queue_name: str) -> logging.Logger:
    """Get the logger for a specific queue.

    Unnamed queues share the ``deferqueue.queue`` logger.

    Args:
        queue_name: Name of the queue.

    Returns:
        Logger instance for the queue.
    """
    if not queue_name:
        return logging.getLogger(QUEUE_LOGGER_PREFIX)
    return logging.getLogger(f"{QUEUE_LOGGER_PREFIX}.{queue_name}")
