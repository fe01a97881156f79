"""
logger.py

This module provides centralized logging for the SDK. Every module obtains its
logger through ``get_logger`` so output is consistently formatted. Logs go to
the console and, when ``LOG_FILE`` is configured, to a file as well.
"""

import logging
import os

from kaiascan.utils.config import get_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def get_logger(name: str) -> logging.Logger:
    """
    Configures and returns a logger instance with the specified name.

    :param name: The name of the logger, typically the module name.
    :return: Configured logger instance.
    """
    config = get_config()
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Ensure no duplicate handlers are added
    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if config.LOG_FILE:
            log_directory = os.path.dirname(config.LOG_FILE)
            if log_directory and not os.path.exists(log_directory):
                os.makedirs(log_directory)

            file_handler = logging.FileHandler(config.LOG_FILE)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
