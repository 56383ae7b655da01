"""Logging configuration and utilities"""
import logging
import sys
from pathlib import Path
from app.core.config import settings

ROOT_LOGGER_NAME = "users_api"


def setup_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Setup and configure the application logger.

    Console output goes to stdout at INFO; when ``LOG_FILE`` is set a file
    handler records everything down to DEBUG.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    # Records stop here instead of reaching the root logger twice
    logger.propagate = False

    return logger


def get_logger(component: str) -> logging.Logger:
    """Child logger of the application logger, e.g. ``users_api.service``"""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")


# Create default logger instance
logger = setup_logger()
