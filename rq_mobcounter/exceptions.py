"""
Exception types raised by the mob counter.
"""

from typing import List, Optional


class MobCounterError(Exception):
    """Base class for all mob counter errors."""


class ConfigError(MobCounterError):
    """Configuration file exists but could not be loaded."""


class LogFileError(MobCounterError):
    """A chat log file could not be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class LogFileNotFound(LogFileError):
    """A required chat log file does not exist."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        month: Optional[str] = None,
        available: Optional[List[str]] = None,
    ):
        super().__init__(message, path)
        self.month = month
        self.available = available or []
