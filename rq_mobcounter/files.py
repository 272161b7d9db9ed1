"""
Discovery of monthly chat log files.

The game writes one file per month named "<prefix> (YYYY.MM)<ext>",
for example "exp (2025.10).htm".
"""

import re
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .config.settings import LogSettings
from .exceptions import LogFileError, LogFileNotFound

logger = logging.getLogger(__name__)


MONTH_PATTERN = re.compile(r"^(\d{4})\.(\d{2})$")


def current_month(now: Optional[datetime] = None) -> str:
    """Month of the given (or current) date as "YYYY.MM"."""
    now = now or datetime.now()
    return f"{now.year}.{now.month:02d}"


def validate_month(value: str) -> str:
    """
    Check a "YYYY.MM" month string.

    Raises:
        ValueError: If the value is not a valid month
    """
    match = MONTH_PATTERN.match(value.strip())
    if not match or not 1 <= int(match.group(2)) <= 12:
        raise ValueError(f"Invalid month {value!r}, expected YYYY.MM")
    return value.strip()


def month_file_name(prefix: str, month: str, extension: str = ".htm") -> str:
    return f"{prefix} ({month}){extension}"


def _file_pattern(prefix: str, extension: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(prefix)} \((\d{{4}}\.\d{{2}})\){re.escape(extension)}$")


def find_log_files(log_dir: Path, prefix: str, extension: str = ".htm") -> List[Path]:
    """
    List chat log files following the monthly naming convention.

    Args:
        log_dir: Chat log directory
        prefix: File name prefix, e.g. "exp"
        extension: File extension including the dot

    Returns:
        Matching files sorted by name (and therefore by month)

    Raises:
        LogFileError: If the directory cannot be listed
    """
    pattern = _file_pattern(prefix, extension)
    try:
        entries = list(Path(log_dir).iterdir())
    except OSError as e:
        raise LogFileError(f"Cannot read directory {log_dir}: {e}", path=str(log_dir)) from e

    files = sorted(p for p in entries if p.is_file() and pattern.match(p.name))
    logger.debug(f"Found {len(files)} log files in {log_dir}")
    return files


def list_available_months(log_dir: Path, prefix: str, extension: str = ".htm") -> List[str]:
    """Months for which a chat log file exists."""
    pattern = _file_pattern(prefix, extension)
    return [pattern.match(p.name).group(1) for p in find_log_files(log_dir, prefix, extension)]


def resolve_files(
    settings: LogSettings, month: Optional[str] = None, process_all: bool = False
) -> List[Path]:
    """
    Pick the log files to process.

    Args:
        settings: Log location settings
        month: Specific "YYYY.MM" month
        process_all: Take every matching file in the log directory

    Returns:
        Files to process, possibly empty when process_all finds nothing

    Raises:
        LogFileNotFound: If the requested (or current) month has no file
    """
    log_dir = settings.log_path
    prefix = settings.file_prefix
    extension = settings.file_extension

    if process_all:
        return find_log_files(log_dir, prefix, extension)

    explicit = month is not None
    month = validate_month(month) if explicit else current_month()
    path = log_dir / month_file_name(prefix, month, extension)
    if path.is_file():
        return [path]

    available = [] if explicit else list_available_months(log_dir, prefix, extension)
    raise LogFileNotFound(
        f"No log file for month {month}: {path.name}",
        path=str(path),
        month=month,
        available=available,
    )
