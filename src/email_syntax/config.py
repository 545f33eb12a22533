"""
Runtime configuration from environment variables.

Grammar limits live in models and are not configurable; only logging is
driven from here.
"""

import logging
import os
from typing import Optional

# Configuration from environment variables
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')

PACKAGE_LOGGER_NAME = 'email_syntax'


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger for console output.

    Adds a console handler only when none is attached yet, so repeated calls
    do not duplicate output.

    Args:
        level: Level name (e.g., "DEBUG"); defaults to LOG_LEVEL

    Returns:
        logging.Logger: The configured package logger

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = (level or LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(numeric_level)

    console_handlers = [
        h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)
    ]
    if not console_handlers:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        formatter = logging.Formatter('%(levelname)s - %(message)s')
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    return package_logger
