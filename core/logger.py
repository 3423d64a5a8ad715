"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.
"""

import sys
from pathlib import Path

from loguru import logger

VALID_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

_configured = False


def _resolve_level(log_level: str, debug: bool) -> str:
    """LOG_LEVEL takes precedence over the DEBUG flag; unknown levels fall back to INFO."""
    if log_level:
        level = log_level.upper()
        return level if level in VALID_LEVELS else "INFO"
    return "DEBUG" if debug else "INFO"


def setup_logger(force: bool = False) -> None:
    """Configure logger handlers. Only configures once unless force=True."""
    global _configured
    if _configured and not force:
        return

    from .config import get_settings

    settings = get_settings()
    log_level = _resolve_level(settings.log_level, settings.debug)

    logger.remove()

    def filter_reloader_logs(record):
        """Filter out logs from __main__ and __mp_main__ (uvicorn reloader processes)."""
        return record["name"] not in ("__main__", "__mp_main__")

    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        filter=filter_reloader_logs,
    )

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    # File logs always DEBUG to capture everything
    logger.add(
        log_dir / "app.log",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="DEBUG",
    )

    logger.add(
        log_dir / "error.log",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        level="ERROR",
    )

    _configured = True


# Configure logger on module import
setup_logger()

__all__ = ["logger", "setup_logger"]
