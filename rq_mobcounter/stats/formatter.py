"""
Text rendering of monster statistics.
"""

from typing import List, Sequence

from rich.markup import escape
from rich.table import Table

from .aggregator import MonsterStats


NAME_WIDTH = 40
COUNT_WIDTH = 15
EXP_WIDTH = 15
ELLIPSIS = "..."
RULE_WIDTH = 60
RULE_WIDTH_EXP = 75

NO_DATA_MESSAGE = "Нет данных для отображения"

HEADER_NAME = "Монстр"
HEADER_COUNT = "Количество"
HEADER_EXP = "Суммарный опыт"


def format_number(value: int) -> str:
    """Group digits in threes: 102413 -> "102,413"."""
    return f"{value:,}"


def truncate_name(name: str, width: int = NAME_WIDTH) -> str:
    """Cut names longer than width, keeping room for the ellipsis."""
    if len(name) <= width:
        return name
    return name[: width - len(ELLIPSIS)] + ELLIPSIS


def format_table(stats: Sequence[MonsterStats], show_exp: bool = False) -> str:
    """
    Render statistics as a fixed-width text table.

    Args:
        stats: Sorted monster statistics
        show_exp: Add the total experience column

    Returns:
        Table text ending with a newline
    """
    if not stats:
        return NO_DATA_MESSAGE + "\n"

    if show_exp:
        header = f"{HEADER_NAME:<{NAME_WIDTH}} | {HEADER_COUNT:>{COUNT_WIDTH}} | {HEADER_EXP:>{EXP_WIDTH}}"
    else:
        header = f"{HEADER_NAME:<{NAME_WIDTH}} | {HEADER_COUNT:>{COUNT_WIDTH}}"

    lines = [header, "-" * (RULE_WIDTH_EXP if show_exp else RULE_WIDTH)]
    for s in stats:
        line = f"{truncate_name(s.name):<{NAME_WIDTH}} | {s.kill_count:>{COUNT_WIDTH}}"
        if show_exp:
            line += f" | {format_number(s.total_exp):>{EXP_WIDTH}}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def format_summary(total_events: int, total_exp: int, show_exp: bool = False) -> str:
    """Trailing totals printed below the table."""
    lines = [f"Всего записей: {total_events}"]
    if show_exp:
        lines.append(f"Всего опыта: {format_number(total_exp)}")
    return "\n".join(lines) + "\n"


def build_rich_table(stats: List[MonsterStats], show_exp: bool = False) -> Table:
    """Build a rich table with the same columns as format_table."""
    table = Table(title="[bold]Статистика убийств[/bold]")
    table.add_column("#", style="dim", width=4)
    table.add_column(HEADER_NAME, style="green", max_width=NAME_WIDTH)
    table.add_column(HEADER_COUNT, style="cyan", justify="right")
    if show_exp:
        table.add_column(HEADER_EXP, style="yellow", justify="right")

    for i, s in enumerate(stats, 1):
        row = [str(i), escape(truncate_name(s.name)), str(s.kill_count)]
        if show_exp:
            row.append(format_number(s.total_exp))
        table.add_row(*row)

    return table
