"""Logging configuration."""

import re
import sys

from loguru import logger

import settings

IPV4 = re.compile(r"\b(?:\d{1,3}\.){3}\d{1,3}\b")


def redact_ips(record: dict) -> None:
    """Mask IPv4 addresses in log messages; audit data only leaves as hashes."""
    record["message"] = IPV4.sub("<ip>", record["message"])


def setup_logging(level: str | None = None, to_file: bool = True):
    """Configure logging with console and optional file output."""
    level = level or settings.LOG_LEVEL
    logger.remove()
    logger.configure(patcher=redact_ips)

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.LOG_DIR / "quadvote_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {} (console level {})", settings.LOG_DIR, level)

    return logger
