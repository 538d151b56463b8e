"""
Text Transform Logging Configuration

Configurable logging with debug mode support.
"""

import os
import logging
import sys
from pathlib import Path
from typing import Optional


# Check for debug mode
DEBUG_MODE = os.environ.get("TXTX_DEBUG", "").lower() in ("1", "true", "yes")

# User input can be arbitrarily large; keep log lines readable
MAX_MESSAGE_LENGTH = 500


class TruncatingFormatter(logging.Formatter):
    """Formatter that shortens oversized log messages."""

    def __init__(self, fmt: Optional[str] = None, max_length: int = MAX_MESSAGE_LENGTH):
        super().__init__(fmt)
        self.max_length = max_length

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if len(message) > self.max_length:
            hidden = len(message) - self.max_length
            message = f"{message[:self.max_length]}... [{hidden} more chars]"
        return message


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        level: Logging level (default: DEBUG if TXTX_DEBUG, else WARNING)
        log_file: Optional path to log file
        quiet: If True, suppress console output

    Returns:
        Configured logger
    """
    if level is None:
        level = logging.DEBUG if DEBUG_MODE else logging.WARNING

    logger = logging.getLogger("text_transform")
    logger.setLevel(level)

    # Clear existing handlers
    logger.handlers.clear()

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)

        if DEBUG_MODE:
            console_format = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        else:
            console_format = "%(levelname)s: %(message)s"

        console_handler.setFormatter(TruncatingFormatter(console_format))
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_format = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
        file_handler.setFormatter(TruncatingFormatter(file_format))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "text_transform") -> logging.Logger:
    """Get a logger under the text_transform namespace.

    Args:
        name: Logger name (will be prefixed with 'text_transform.')

    Returns:
        Logger instance
    """
    if not name.startswith("text_transform"):
        name = f"text_transform.{name}"
    return logging.getLogger(name)


# Environment variable documentation
ENV_VARS = {
    "TXTX_DEBUG": {
        "description": "Enable debug mode with verbose logging",
        "values": ["1", "true", "yes"],
        "default": "false"
    },
    "TXTX_MAX_INPUT_SIZE": {
        "description": "Maximum input length accepted by the CLI and API",
        "default": "100000"
    },
    "TXTX_API_HOST": {
        "description": "Host the REST API binds to",
        "default": "127.0.0.1"
    },
    "TXTX_API_PORT": {
        "description": "Port the REST API listens on",
        "default": "8000"
    },
}
