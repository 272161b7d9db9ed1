"""
Chat log parser that turns exported HTML logs into kill events.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Dict, Any, Union
import logging

from .tokenizer import RowTokenizer, ParsedRow
from .events import KillEvent
from ..config import game_data
from ..exceptions import LogFileError


logger = logging.getLogger(__name__)


def parse_entry(timestamp: str, content: str) -> Optional[KillEvent]:
    """
    Build a kill event from one chat message.

    Args:
        timestamp: Value of the row's title attribute
        content: Message text with markup already removed

    Returns:
        KillEvent, or None if the message is not a monster kill
    """
    content = content.strip()
    if not content:
        return None

    marker = game_data.get_death_marker()
    name, found, rest = content.partition(marker)
    if not found:
        return None

    # "Вы погибаете" and other player status messages
    name = name.strip()
    if not name or game_data.is_self_reference(name):
        return None

    exp_gained = 0
    match = game_data.get_exp_regex().search(rest)
    if match:
        try:
            exp_gained = int(match.group(1))
        except (ValueError, IndexError):
            exp_gained = 0

    return KillEvent(timestamp=timestamp, monster_name=name, exp_gained=max(exp_gained, 0))


class ChatLogParser:
    """
    Parser for Royal Quest chat log files.

    Finds chat rows, keeps the kill messages and skips everything else.
    Malformed rows are never an error: they are counted and dropped.
    """

    def __init__(self, encoding: str = "utf-8"):
        """
        Initialize the chat log parser.

        Args:
            encoding: Text encoding of log files
        """
        self.tokenizer = RowTokenizer()
        self.encoding = encoding
        self.current_file: Optional[Path] = None
        self.events_processed = 0
        self.rows_skipped = 0

    def iter_events(self, text: str) -> Iterator[KillEvent]:
        """
        Lazily yield kill events found in raw log text.

        Args:
            text: Raw HTML log text

        Yields:
            KillEvent objects in document order
        """
        for row in self.tokenizer.iter_rows(text):
            event = self._process_row(row)
            if event is None:
                self.rows_skipped += 1
                continue
            self.events_processed += 1
            yield event

    def parse_text(self, text: str) -> List[KillEvent]:
        """
        Parse raw log text and return all kill events.

        Args:
            text: Raw HTML log text

        Returns:
            List of KillEvent objects
        """
        return list(self.iter_events(text))

    def parse_file(self, file_path: Union[str, Path]) -> List[KillEvent]:
        """
        Parse a chat log file.

        Args:
            file_path: Path to the chat log file

        Returns:
            List of KillEvent objects

        Raises:
            LogFileError: If the file cannot be read
        """
        file_path = Path(file_path)
        self.current_file = file_path

        try:
            text = file_path.read_text(encoding=self.encoding, errors="replace")
        except OSError as e:
            raise LogFileError(f"Cannot read {file_path}: {e}", path=str(file_path)) from e

        before = self.events_processed
        events = self.parse_text(text)
        logger.debug(
            f"Parsed {file_path.name}: {self.events_processed - before} events, "
            f"{self.rows_skipped} rows skipped so far"
        )
        return events

    def _process_row(self, row: ParsedRow) -> Optional[KillEvent]:
        """Turn a chat row into an event, or None if it is not a kill."""
        try:
            return parse_entry(row.timestamp, row.content)
        except ValueError as e:
            logger.debug(f"Skipping row at {row.timestamp}: {e}")
            return None

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with parsing stats
        """
        return {
            "file": str(self.current_file) if self.current_file else None,
            "events_processed": self.events_processed,
            "rows_skipped": self.rows_skipped,
            "tokenizer_stats": self.tokenizer.get_stats(),
        }

    def reset(self):
        """Reset parser state for new file."""
        self.tokenizer = RowTokenizer()
        self.events_processed = 0
        self.rows_skipped = 0
        self.current_file = None
