"""
Royal Quest chat log text constants.

The chat log is written in the client language. These markers identify kill
messages and are configurable so that a custom config file can adjust them.
"""

import re
from functools import lru_cache
from typing import Dict, Pattern


# Substring that marks a kill message: "<Monster> погибает."
DEATH_MARKER = "погибает"

# Player status messages start with this prefix ("Вы достигли 2 уровня!")
SELF_PREFIX = "Вы"

# "Получено опыта: 2873." with an optional trailing "а"
EXP_PATTERN = r"Получено опыт[а]?:\s*(\d+)"

LOG_MARKERS: Dict[str, str] = {
    "death_marker": DEATH_MARKER,
    "self_prefix": SELF_PREFIX,
    "exp_pattern": EXP_PATTERN,
}


def get_death_marker() -> str:
    """Get the substring identifying a kill message."""
    return LOG_MARKERS["death_marker"]


def get_self_prefix() -> str:
    """Get the prefix of the player's own status messages."""
    return LOG_MARKERS["self_prefix"]


def get_exp_regex() -> Pattern[str]:
    """Get the compiled experience pattern."""
    return _compile(LOG_MARKERS["exp_pattern"])


def is_self_reference(name: str) -> bool:
    return name.startswith(get_self_prefix())


def reset_markers() -> None:
    """Restore the built-in marker values."""
    LOG_MARKERS.update(
        death_marker=DEATH_MARKER,
        self_prefix=SELF_PREFIX,
        exp_pattern=EXP_PATTERN,
    )


@lru_cache(maxsize=8)
def _compile(pattern: str) -> Pattern[str]:
    return re.compile(pattern)
