"""Logging configuration using Loguru."""

import sys

from loguru import logger

from config import LOG_FILE, LOG_FORMAT, LOG_LEVEL


def setup_logging() -> None:
    logger.remove()
    logger.configure(extra={"name": "dashboard"})

    # Console
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=LOG_LEVEL,
        colorize=True,
    )

    # File
    if LOG_FILE:
        logger.add(
            LOG_FILE,
            format=LOG_FORMAT,
            level=LOG_LEVEL,
            rotation="10 MB",
            retention="7 days",
        )

    logger.debug(f"Logging initialized - Level: {LOG_LEVEL}")


def get_logger(name: str):
    return logger.bind(name=name)


setup_logging()
