#!/usr/bin/env python3
"""
Command-line interface for the Royal Quest mob counter.
"""

import click
import logging
from pathlib import Path
from typing import List
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config.loader import ConfigLoader, load_settings
from .exceptions import ConfigError, LogFileError, LogFileNotFound
from .files import resolve_files, validate_month
from .parser.events import KillEvent
from .parser.parser import ChatLogParser
from .stats.aggregator import KillAggregator, SortKey
from .stats.formatter import build_rich_table, format_summary, format_table


# Set up rich console for pretty output
console = Console()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
)
logger = logging.getLogger(__name__)


def _check_month(ctx, param, value):
    if value is None:
        return None
    try:
        return validate_month(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.command()
@click.option("--exp", "show_exp", is_flag=True, help="Показывать суммарный опыт")
@click.option(
    "--month",
    callback=_check_month,
    metavar="YYYY.MM",
    help="Анализ конкретного месяца",
)
@click.option("--all", "process_all", is_flag=True, help="Обработка всех файлов")
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice([key.value for key in SortKey]),
    default=SortKey.BY_COUNT.value,
    show_default=True,
    help="Сортировка по количеству убийств или по опыту",
)
@click.option("--limit", default=0, type=int, help="Показать только первые N монстров (0 - все)")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Путь к файлу конфигурации",
)
@click.option("--pretty", is_flag=True, help="Цветная таблица вместо текстовой")
@click.option(
    "--init-config",
    type=click.Path(dir_okay=False),
    help="Записать текущие настройки в файл конфигурации и выйти",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(show_exp, month, process_all, sort_key, limit, config_path, pretty, init_config, verbose):
    """Royal Quest Mob Counter - статистика убитых монстров по логам чата"""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(f"ошибка загрузки конфига: {e}")

    if init_config:
        try:
            path = ConfigLoader.save_config(settings, init_config)
        except ConfigError as e:
            raise click.ClickException(str(e))
        console.print(f"[green]Конфигурация сохранена: {path}[/green]")
        return

    if not settings.log_path.is_dir():
        raise click.ClickException(f"путь к логам не найден: {settings.log_path}")

    if process_all and month:
        logger.warning("--all overrides --month")

    try:
        files = resolve_files(settings, month=month, process_all=process_all)
    except LogFileNotFound as e:
        if month and not process_all:
            raise click.ClickException(f"файл для месяца {month} не найден")
        show_available_months(e)
        return
    except LogFileError as e:
        raise click.ClickException(f"ошибка чтения директории: {e}")

    if not files:
        console.print("нет файлов для обработки")
        return

    events = process_files(files)

    aggregator = KillAggregator()
    aggregator.process_events(events)
    monster_stats = aggregator.compute(SortKey.parse(sort_key), limit)
    summary = aggregator.get_summary()

    if len(files) > 1:
        click.echo("=== ОБЩАЯ СТАТИСТИКА ===\n")

    if pretty:
        console.print(build_rich_table(monster_stats, show_exp))
    else:
        click.echo(format_table(monster_stats, show_exp), nl=False)

    click.echo()
    click.echo(format_summary(len(events), summary["total_exp"], show_exp), nl=False)


def process_files(files: List[Path]) -> List[KillEvent]:
    """
    Parse files one by one and concatenate their events.

    Unreadable files are reported and skipped.
    """
    parser = ChatLogParser()
    all_events: List[KillEvent] = []

    for file_path in files:
        click.echo(f"обработка: {file_path.name}")
        try:
            events = parser.parse_file(file_path)
        except LogFileError as e:
            logger.error(f"ошибка при парсинге {file_path}: {e}")
            continue

        all_events.extend(events)
        click.echo(f"найдено записей: {len(events)}\n")

    logger.debug(f"Parser stats: {parser.get_stats()}")
    return all_events


def show_available_months(error: LogFileNotFound):
    """Report a missing current-month file and list what is there."""
    logger.debug(str(error))
    console.print(
        f"[yellow]файл для текущего месяца {escape(error.month or '')} не найден.[/yellow]"
    )
    if error.available:
        console.print("Доступные файлы:")
        for available_month in error.available:
            console.print(f"  - {available_month}")
    else:
        console.print("нет файлов для обработки")


def main():
    """Entry point for the rq-mobcounter command."""
    cli()


if __name__ == "__main__":
    main()
