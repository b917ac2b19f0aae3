"""Configuration loader with environment variable support."""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logging.warning(f"Ignoring {name}={value!r}: not a number of seconds")
        return None


class Config:
    """Application configuration."""

    # Metadata lookup service
    API_ENDPOINT: str = os.getenv("DOCMAN_API_ENDPOINT", "http://docman.lcpu.dev")
    # Seconds; unset means a lookup blocks until the server answers
    REQUEST_TIMEOUT: Optional[float] = _optional_float("DOCMAN_REQUEST_TIMEOUT")

    # Command line
    STDIN_SENTINEL: str = "-"

    # Logging
    LOG_LEVEL: str = os.getenv("DOCMAN_LOG_LEVEL", "WARNING")
    LOG_FILE: str = os.getenv("DOCMAN_LOG_FILE", "")
