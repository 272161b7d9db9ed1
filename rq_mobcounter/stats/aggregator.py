"""
Kill aggregator for grouping events into per-monster statistics.
"""

from enum import Enum
from typing import Iterable, List, Dict, Any, Union
from dataclasses import dataclass

from ..parser.events import KillEvent


class SortKey(Enum):
    """Field used to order monster statistics."""

    BY_COUNT = "count"
    BY_EXP = "exp"

    @classmethod
    def parse(cls, value: Union["SortKey", str]) -> "SortKey":
        """Accept a SortKey, its value ("count"/"exp") or "by_count"/"by_exp"."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized.startswith("by_"):
            normalized = normalized[3:]
        for key in cls:
            if key.value == normalized:
                return key
        raise ValueError(f"Unknown sort key: {value!r}")


@dataclass(frozen=True)
class MonsterStats:
    """Kill totals for one monster name."""

    name: str
    kill_count: int = 0
    total_exp: int = 0


@dataclass
class _Accumulator:
    kill_count: int = 0
    total_exp: int = 0


class KillAggregator:
    """
    Aggregates kill events into per-monster counts and experience totals.
    """

    def __init__(self):
        self.monsters: Dict[str, _Accumulator] = {}
        self.total_events = 0

    def process_events(self, events: Iterable[KillEvent]):
        """
        Process a sequence of events and accumulate totals.

        Args:
            events: Kill events, typically from ChatLogParser
        """
        for event in events:
            self.process_event(event)

    def process_event(self, event: KillEvent):
        """Process a single event."""
        if not event.monster_name:
            return

        acc = self.monsters.get(event.monster_name)
        if acc is None:
            acc = self.monsters[event.monster_name] = _Accumulator()

        acc.kill_count += 1
        acc.total_exp += event.exp_gained
        self.total_events += 1

    def compute(
        self, sort_key: Union[SortKey, str] = SortKey.BY_COUNT, limit: int = 0
    ) -> List[MonsterStats]:
        """
        Get monster statistics sorted by the chosen key.

        Args:
            sort_key: SortKey.BY_COUNT or SortKey.BY_EXP
            limit: Maximum number of entries; 0 or negative means all

        Returns:
            Sorted list of MonsterStats, highest first, ties by name
        """
        sort_key = SortKey.parse(sort_key)
        stats = [
            MonsterStats(name=name, kill_count=acc.kill_count, total_exp=acc.total_exp)
            for name, acc in self.monsters.items()
        ]

        if sort_key is SortKey.BY_EXP:
            stats.sort(key=lambda s: (-s.total_exp, s.name))
        else:
            stats.sort(key=lambda s: (-s.kill_count, s.name))

        if limit > 0:
            stats = stats[:limit]
        return stats

    def get_summary(self) -> Dict[str, Any]:
        """Get aggregation summary."""
        return {
            "total_events": self.total_events,
            "total_kills": sum(acc.kill_count for acc in self.monsters.values()),
            "total_exp": sum(acc.total_exp for acc in self.monsters.values()),
            "monster_count": len(self.monsters),
        }


def compute(
    events: Iterable[KillEvent],
    sort_key: Union[SortKey, str] = SortKey.BY_COUNT,
    limit: int = 0,
) -> List[MonsterStats]:
    """Aggregate events in one step. See KillAggregator.compute."""
    aggregator = KillAggregator()
    aggregator.process_events(events)
    return aggregator.compute(sort_key, limit)
