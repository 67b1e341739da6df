"""
Constants for the Line Change Timer application.

This module contains configuration defaults used throughout the application.
"""

# Application metadata
APP_TITLE = "Line Change Timer"

# Time units (all accounting is done in milliseconds)
MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# Session cap defaults
DEFAULT_CAP_MIN = 60
MIN_CAP_MIN = 1
MAX_CAP_MIN = 24 * 60

# Formatter ceiling (display only, independent of the accounting cap)
DEFAULT_DISPLAY_CEILING_MIN = 100 * 60 - 1

# Poll period suggested to the display refresh collaborator
DEFAULT_REFRESH_MS = 100

# Roster input
NAME_SEPARATOR = ","
MAX_NAME_LENGTH = 50

# Key under which roster names are kept in the name store
NAMES_STORE_KEY = "lineChangePlayerNames"
DEFAULT_NAMES_FILE = "linechange_names.json"
DEFAULT_SAVE_DIR = "saves"

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
