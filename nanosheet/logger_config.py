"""
Centralized logging configuration for nanosheet.

Library modules only create module-level loggers; applications call
setup_logging() once at startup to attach handlers. Level and log file
default to the NANOSHEET_LOG_LEVEL / NANOSHEET_LOG_FILE settings.

Usage:
    from nanosheet import setup_logging

    setup_logging()                  # from settings
    setup_logging("DEBUG", "engine.log")
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

from .config import get_settings

# Track if logging has been configured to prevent double-init
_logging_initialized = False
_installed_handlers: List[logging.Handler] = []

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    level: Optional[Union[int, str]] = None,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
) -> bool:
    """
    Configure the root logger.

    Args:
        level: Console logging level (name or number); defaults to settings.log_level
        log_file: Optional path of a rotating log file; it captures DEBUG.
            Defaults to settings.log_file.
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        True if handlers were installed, False if logging was already set up.
    """
    global _logging_initialized

    if _logging_initialized:
        logging.debug("Logging already initialized, skipping.")
        return False

    settings = get_settings()
    if level is None:
        level = settings.log_level
    if log_file is None:
        log_file = settings.log_file

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Allow all; handlers filter
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    _logging_initialized = True
    logging.getLogger(__name__).info("Logging initialized. File: %s", log_file or "<none>")
    return True


def reset_logging() -> None:
    """Detach the handlers installed by setup_logging() so it can run again."""
    global _logging_initialized
    root_logger = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()
    _logging_initialized = False


def get_logger(name: str) -> logging.Logger:
    """Convenience wrapper around logging.getLogger()."""
    return logging.getLogger(name)
