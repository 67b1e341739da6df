"""
Logging setup for the Line Change Timer.

Every module logs through a child of the ``linechange`` logger. Handlers are
named so that calling ``configure_logging`` more than once never duplicates
output.
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "linechange"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the application namespace.

    Args:
        name: Module name (``__name__``) or short suffix; None for the root

    Returns:
        Logger instance
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
    console: bool = True,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Install console and optional rotating file handlers on the root app logger.

    Args:
        level: Logging level name or number
        log_dir: Directory for ``linechange.log``; no file logging when None
        console: Whether to log to stderr
        max_bytes: Rotation size for the file handler
        backup_count: Number of rotated files to keep

    Returns:
        The configured application logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT)

    console_handler_name = f"{ROOT_LOGGER_NAME}:console"
    if console and not any(h.get_name() == console_handler_name for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(fmt)
        console_handler.set_name(console_handler_name)
        logger.addHandler(console_handler)

    file_handler_name = f"{ROOT_LOGGER_NAME}:file"
    if log_dir and not any(h.get_name() == file_handler_name for h in logger.handlers):
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_path / f"{ROOT_LOGGER_NAME}.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(fmt)
        file_handler.set_name(file_handler_name)
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
