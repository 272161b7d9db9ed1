"""
Chat log parser module for extracting kill events from Royal Quest logs.
"""

from .tokenizer import RowTokenizer, ParsedRow
from .events import KillEvent
from .parser import ChatLogParser, parse_entry

__all__ = ["RowTokenizer", "ParsedRow", "KillEvent", "ChatLogParser", "parse_entry"]
