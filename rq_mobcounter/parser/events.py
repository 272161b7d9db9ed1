"""
Event records produced by the chat log parser.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class KillEvent:
    """A single monster kill recovered from the chat log."""

    timestamp: str
    monster_name: str
    exp_gained: int = 0

    def __post_init__(self):
        if not self.monster_name:
            raise ValueError("KillEvent requires a monster name")
        if self.exp_gained < 0:
            raise ValueError(f"Negative experience for {self.monster_name}: {self.exp_gained}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
