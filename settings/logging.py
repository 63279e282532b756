"""Logging configuration."""

import logging
import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


class _StdlibBridge(logging.Handler):
    """Forward stdlib log records (httpx, duckdb, streamlit) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO", to_file: bool = True, log_dir: Path = LOG_DIR):
    """Configure loguru with a console sink and an optional daily file."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "peoples_affairs_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", log_dir)

    # httpx logs every request at INFO
    logging.basicConfig(handlers=[_StdlibBridge()], level=logging.WARNING, force=True)

    return logger
