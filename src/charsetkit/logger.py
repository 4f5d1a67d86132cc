#!/usr/bin/env python3
"""
Shared logging configuration for charsetkit.
"""

from pathlib import Path
from typing import Optional
from aiologger import Logger
from aiologger.levels import LogLevel
from aiologger.handlers.files import AsyncTimedRotatingFileHandler
from aiologger.formatters.base import Formatter

from .utils.config import LoggingConfig, get_config


# Global logger instance
_global_logger = None

_LEVELS = {
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFO,
    "WARNING": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
    "CRITICAL": LogLevel.CRITICAL,
}


def setup_logging(log_level: Optional[str] = None,
                  logging_config: Optional[LoggingConfig] = None) -> Logger:
    """Setup the process-wide logger with a rotating file handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            overrides the configured level when given
        logging_config: Logging section to use instead of the global config

    Returns:
        Configured logger instance
    """
    global _global_logger

    if _global_logger is not None:
        return _global_logger

    settings = logging_config or get_config().logging
    level_name = (log_level or settings.level).upper()

    log_dir = Path(settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "charsetkit.log"

    logger = Logger(name="charsetkit", level=_LEVELS.get(level_name, LogLevel.CRITICAL))

    file_handler = AsyncTimedRotatingFileHandler(
        filename=str(log_file),
        when='D',
        interval=1,
        backup_count=settings.backup_count,
        encoding="utf-8"
    )
    file_handler.formatter = Formatter(
        fmt=settings.format,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    logger.add_handler(file_handler)

    _global_logger = logger
    return _global_logger


def get_logger(name: str = None) -> Logger:
    """Get the singleton logger instance.

    Args:
        name: Logger name (ignored for singleton instance)

    Returns:
        Singleton logger instance with handlers configured
    """
    global _global_logger

    if _global_logger is None:
        _global_logger = setup_logging()

    return _global_logger


async def shutdown_logging() -> None:
    """Flush and close the handlers of the process logger."""
    global _global_logger

    if _global_logger is not None:
        await _global_logger.shutdown()
        _global_logger = None
