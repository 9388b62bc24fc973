"""
Logging Configuration
Sets up the logger for the shapes2d namespace.

The library itself only emits records through module level loggers
(``logging.getLogger(__name__)``); applications that want to see them call
:func:`setup_logging` once at start-up.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "shapes2d"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'shapes2d' namespace.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized for %s (level=%s).", PACKAGE_LOGGER_NAME, logging.getLevelName(level))
    return logger
