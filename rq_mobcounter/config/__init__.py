"""
Configuration for the mob counter: log locations and log text markers.
"""

from .settings import (
    LogSettings,
    DEFAULT_LOG_PATH,
    DEFAULT_FILE_PREFIX,
    DEFAULT_FILE_EXTENSION,
)
from .loader import ConfigLoader, load_settings

__all__ = [
    "LogSettings",
    "DEFAULT_LOG_PATH",
    "DEFAULT_FILE_PREFIX",
    "DEFAULT_FILE_EXTENSION",
    "ConfigLoader",
    "load_settings",
]
