"""
Configuration for the Line Change Timer web application.

Values are read from the environment once at import time and loaded into the
Flask config with ``app.config.from_object``.
"""
import os

from .utils.constants import (
    DEFAULT_CAP_MIN, DEFAULT_DISPLAY_CEILING_MIN, DEFAULT_HOST, DEFAULT_NAMES_FILE,
    DEFAULT_PORT, DEFAULT_REFRESH_MS, DEFAULT_SAVE_DIR
)


class Config:
    TESTING = False
    # Session cap in minutes; 0 disables the cap
    CAP_MINUTES = float(os.environ.get('LINECHANGE_CAP_MIN', str(DEFAULT_CAP_MIN)))
    # Clocks shown to users never read past this, regardless of the cap
    DISPLAY_CEILING_MINUTES = float(
        os.environ.get('LINECHANGE_DISPLAY_CEILING_MIN', str(DEFAULT_DISPLAY_CEILING_MIN))
    )
    # Poll period suggested to the browser for /api/state
    REFRESH_MS = int(os.environ.get('LINECHANGE_REFRESH_MS', str(DEFAULT_REFRESH_MS)))
    NAMES_FILE = os.environ.get('LINECHANGE_NAMES_FILE', DEFAULT_NAMES_FILE)
    SAVE_DIR = os.environ.get('LINECHANGE_SAVE_DIR', DEFAULT_SAVE_DIR)
    LOG_LEVEL = os.environ.get('LINECHANGE_LOG_LEVEL', 'INFO')
    # Optional: directory for a rotating log file. Empty disables file logging.
    LOG_DIR = os.environ.get('LINECHANGE_LOG_DIR', '')
    HOST = os.environ.get('LINECHANGE_HOST', DEFAULT_HOST)
    PORT = int(os.environ.get('LINECHANGE_PORT', str(DEFAULT_PORT)))
    STATIC_FOLDER = os.environ.get('LINECHANGE_STATIC_FOLDER', '.')
