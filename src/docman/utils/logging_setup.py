"""Logging configuration."""
import logging
import sys
from typing import Optional, Union


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Set up logging configuration.

    Console output goes to stderr so that stdout only carries the
    assembled document.

    Args:
        level: Logging level, as a number or a name such as "INFO"
        log_file: Optional file that receives the same records
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure logging format
    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    date_format = '%Y-%m-%d %H:%M:%S'

    # Set up handlers
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    # Configure logging
    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=handlers,
        force=True
    )

    logging.debug("Logging initialized")
    if log_file:
        logging.debug(f"Log file: {log_file}")


def log_operation(operation: str, details: str, level: int = logging.INFO) -> None:
    """Log an operation with details."""
    logging.log(level, f"{operation}: {details}")


def log_error(error_type: str, details: str) -> None:
    """Log error details."""
    logging.error(f"{error_type}: {details}")
