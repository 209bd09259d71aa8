# core/logging_config.py
"""Logging setup for the command line renderer."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Logger and handler installed by the last setup_logging() call
_installed = None


def setup_logging(level: Optional[str] = None, name: str = "") -> logging.Logger:
    """
    Set up logging for the renderer.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to INFO.
        name: Logger name; the root logger by default so every module's
            ``logging.getLogger(__name__)`` logger is covered.

    Returns:
        Configured logger instance
    """
    global _installed

    if level is None:
        level = "INFO"
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Replace rather than stack when main() is called more than once
    if _installed is not None:
        previous_logger, previous_handler = _installed
        previous_logger.removeHandler(previous_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)
    _installed = (logger, console_handler)

    return logger
