"""
Statistics module for aggregating kill events and rendering them.
"""

from .aggregator import KillAggregator, MonsterStats, SortKey, compute
from .formatter import format_number, format_table, format_summary, truncate_name

__all__ = [
    "KillAggregator",
    "MonsterStats",
    "SortKey",
    "compute",
    "format_number",
    "format_table",
    "format_summary",
    "truncate_name",
]
