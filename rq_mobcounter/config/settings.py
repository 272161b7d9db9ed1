"""
Settings for locating Royal Quest chat logs.

Values come from built-in defaults, an optional config file and environment
variables, in increasing order of precedence.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path, PureWindowsPath
from typing import Any, Dict, Optional


DEFAULT_LOG_PATH = r"D:\B.A.S.E\Games\Royal Quest\chatlogs"
DEFAULT_FILE_PREFIX = "exp"
DEFAULT_FILE_EXTENSION = ".htm"


def normalize_path(value: str) -> Path:
    """Convert a configured path to the local path flavour.

    Config files written on Windows use backslashes; on other platforms
    those are turned into regular separators.
    """
    if os.sep == "/" and "\\" in value:
        return Path(PureWindowsPath(value).as_posix())
    return Path(value)


@dataclass(frozen=True)
class LogSettings:
    """Where chat logs live and how their files are named."""

    log_path: Path = field(default_factory=lambda: normalize_path(DEFAULT_LOG_PATH))
    file_prefix: str = DEFAULT_FILE_PREFIX
    file_extension: str = DEFAULT_FILE_EXTENSION

    @classmethod
    def from_env(cls, base: Optional["LogSettings"] = None) -> "LogSettings":
        """Apply RQ_LOG_PATH / RQ_FILE_PREFIX overrides on top of base."""
        settings = base or cls()

        log_path = os.getenv("RQ_LOG_PATH")
        if log_path:
            settings = replace(settings, log_path=normalize_path(log_path))

        file_prefix = os.getenv("RQ_FILE_PREFIX")
        if file_prefix:
            settings = replace(settings, file_prefix=file_prefix)

        return settings

    def to_dict(self) -> Dict[str, Any]:
        return {
            "log_path": str(self.log_path),
            "file_prefix": self.file_prefix,
        }
