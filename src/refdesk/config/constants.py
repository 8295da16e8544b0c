"""Default paths, environment variable names, and constants."""

from __future__ import annotations

import platformdirs

APP_NAME = "refdesk"
APP_AUTHOR = "refdesk"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"
DATA_DIR = platformdirs.user_data_path(APP_NAME, APP_AUTHOR)
SESSION_FILE = DATA_DIR / "session.json"

# Environment variable names
ENV_API_URL = "REFDESK_API_URL"
ENV_PROFILE = "REFDESK_PROFILE"
ENV_SESSION_FILE = "REFDESK_SESSION_FILE"

# Persisted storage key for the session credential
AUTH_TOKEN_KEY = "authToken"

# Transport defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_ERROR_MESSAGE = "An error occurred"

# Appointment listing
APPOINTMENT_PAGE_SIZE = 20
APPOINTMENT_ORDERING = "-appointment_date,appointment_time"
APPOINTMENT_LIST_TIMEOUT_MS = 15000
DEFAULT_APPOINTMENT_TIME = "00:00:00"
INITIAL_APPOINTMENT_STATUS = "upcoming"

# Match detail
MATCH_DETAIL_TIMEOUT_MS = 5000
TIMEOUT_MESSAGE = "Request timed out - please try again"
