"""
Utilities package for the Line Change Timer.

This package contains the clock source, formatter, logging helpers and
constants used throughout the application.
"""
from .time_utils import Clock, SystemClock, fmt_duration, minutes_to_ms, now_ms
from .logger import configure_logging, get_logger
from .constants import (
    APP_TITLE, DEFAULT_CAP_MIN, DEFAULT_DISPLAY_CEILING_MIN, DEFAULT_HOST,
    DEFAULT_NAMES_FILE, DEFAULT_PORT, DEFAULT_REFRESH_MS, DEFAULT_SAVE_DIR,
    MAX_NAME_LENGTH, MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, NAME_SEPARATOR,
    MAX_CAP_MIN, MIN_CAP_MIN, NAMES_STORE_KEY
)

__all__ = [
    "Clock", "SystemClock", "fmt_duration", "minutes_to_ms", "now_ms",
    "configure_logging", "get_logger",
    "APP_TITLE", "DEFAULT_CAP_MIN", "DEFAULT_DISPLAY_CEILING_MIN", "DEFAULT_HOST",
    "DEFAULT_NAMES_FILE", "DEFAULT_PORT", "DEFAULT_REFRESH_MS", "DEFAULT_SAVE_DIR",
    "MAX_NAME_LENGTH", "MS_PER_HOUR", "MS_PER_MINUTE", "MS_PER_SECOND", "NAME_SEPARATOR",
    "MAX_CAP_MIN", "MIN_CAP_MIN", "NAMES_STORE_KEY"
]
