"""
config.py: Runtime settings read from the environment.
"""

import logging
import os

from .constants import DB_FILE

_FALSY = {"0", "false", "no", "off"}


def get_db_path() -> str:
    return os.getenv("SKY_HOPPER_DB", DB_FILE).strip() or DB_FILE


def profiles_enabled() -> bool:
    return os.getenv("SKY_HOPPER_PROFILES", "1").strip().lower() not in _FALSY


def get_log_level() -> str:
    # Unknown level names fall back to INFO instead of failing setup
    level = os.getenv("SKY_HOPPER_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level
