"""
Logging Configuration
Sets up the package logger ("nonogram") for the application and the tests.

The level can be overridden without touching code through the
``NONOGRAM_LOG_LEVEL`` environment variable (e.g. ``DEBUG``), which is
handy when chasing hover/selection event ordering in the grid widget.
"""
import logging
import os
import sys
from typing import Optional, Union

LOG_LEVEL_ENV = "NONOGRAM_LOG_LEVEL"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def resolve_level(level: Union[int, str]) -> int:
    """Turn 'debug' / 'INFO' / 10 into a logging level number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'nonogram' namespace logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug"). The
            NONOGRAM_LOG_LEVEL environment variable wins when set.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    env_level = os.environ.get(LOG_LEVEL_ENV)
    numeric_level = resolve_level(env_level if env_level else level)

    logger = logging.getLogger("nonogram")
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers when the window is re-created in one process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(numeric_level)}.")
    return logger
