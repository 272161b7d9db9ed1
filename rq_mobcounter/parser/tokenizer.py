"""
Row tokenizer for Royal Quest HTML chat logs.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Dict, Any


@dataclass
class ParsedRow:
    """A table row from the chat log with markup removed."""

    timestamp: str
    content: str


class RowTokenizer:
    """
    Finds chat rows in exported HTML logs.

    Each message is written as a table row whose title attribute holds the
    timestamp, followed by a cell with the message text:

        <TR title='12.10.2025 21:05:11'><TD><font color=...>Текст</font></TD></TR>
    """

    # Format: "<TR ... title='TIMESTAMP' ...><TD ...>text up to end of line"
    ROW_PATTERN = re.compile(
        r"<TR[^>]*(?<![\w-])title=(['\"])(.+?)\1[^>]*>\s*<TD[^>]*>([^\n]+)",
        re.IGNORECASE,
    )

    TAG_PATTERN = re.compile(r"<[^>]*>")

    def __init__(self):
        self.row_count = 0
        self.empty_count = 0

    def iter_rows(self, text: str) -> Iterator[ParsedRow]:
        """
        Yield every chat row in document order.

        Args:
            text: Raw HTML log text

        Yields:
            ParsedRow for each matched row, including rows with empty text
        """
        for match in self.ROW_PATTERN.finditer(text):
            self.row_count += 1
            content = self.strip_tags(match.group(3))
            if not content:
                self.empty_count += 1
            yield ParsedRow(
                timestamp=match.group(2),
                content=content,
            )

    @classmethod
    def strip_tags(cls, content: str) -> str:
        """Remove markup tags and surrounding whitespace."""
        return cls.TAG_PATTERN.sub("", content).strip()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "rows_processed": self.row_count,
            "empty_rows": self.empty_count,
        }
