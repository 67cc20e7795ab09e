"""Logging setup shared by the API and the operator scripts."""
import logging
from logging.handlers import RotatingFileHandler

import config

LOGGER_NAME = "bloglist"

_formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")


def setup_logging(level: str = config.LOG_LEVEL, log_file: str = config.LOG_FILE) -> logging.Logger:
    """Attach console and rotating file handlers to the application logger"""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level, logging.INFO))
    console_handler.setFormatter(_formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(log_file, maxBytes=2000000, backupCount=3, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger for the given module"""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
