"""loguru sink setup shared by the app factory and the dev server."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    logger.remove()  # drop loguru's default handler
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=True)
