"""
Pytest configuration and shared fixtures for the test suite.

Provides sample chat log markup and temporary chat log directories used
across the parser, statistics and CLI tests.
"""

import pytest
from pathlib import Path

import sys

sys.path.insert(0, str(Path(__file__).parent.parent))

from rq_mobcounter.config import game_data


def make_row(timestamp: str, text: str) -> str:
    """Render one chat row the way the game client exports it."""
    return (
        f"<TR title='{timestamp}'><TD><font color=\"#E0E0E0\">{text}</font></TD></TR>\n"
    )


SAMPLE_MESSAGES = [
    ("01.10.2024 20:00:01", "Злая шкатулка погибает. Получено опыта: 2873."),
    ("01.10.2024 20:00:05", "Росинка погибает."),
    ("01.10.2024 20:00:09", "Вы достигли 2 уровня!"),
    ("01.10.2024 20:00:12", "Слизь погибает. Получено опыта: 100."),
    ("01.10.2024 20:00:15", "Вы получили <b>Ржавый ключ</b>"),
    ("01.10.2024 20:00:18", "Слизь погибает. Получено опыта: 100."),
    ("01.10.2024 20:00:21", "<i>Слизь</i> погибает. Получено опыт: 100!"),
    ("01.10.2024 20:00:25", "   "),
]


@pytest.fixture
def sample_log_html():
    """Sample exported chat log with kills, status messages and noise."""
    rows = "".join(make_row(ts, text) for ts, text in SAMPLE_MESSAGES)
    return (
        "<HTML><HEAD><META charset='utf-8'></HEAD><BODY><TABLE>\n"
        f"{rows}"
        "</TABLE></BODY></HTML>\n"
    )


@pytest.fixture
def log_dir(tmp_path, sample_log_html):
    """Chat log directory with two monthly files and an unrelated file."""
    directory = tmp_path / "chatlogs"
    directory.mkdir()
    (directory / "exp (2024.09).htm").write_text(
        make_row("15.09.2024 10:00:00", "Росинка погибает. Получено опыта: 15."),
        encoding="utf-8",
    )
    (directory / "exp (2024.10).htm").write_text(sample_log_html, encoding="utf-8")
    (directory / "chat (2024.10).htm").write_text(sample_log_html, encoding="utf-8")
    (directory / "notes.txt").write_text("not a log", encoding="utf-8")
    return directory


@pytest.fixture
def config_file(tmp_path, log_dir):
    """JSON config pointing at the temporary chat log directory."""
    path = tmp_path / "config.json"
    path.write_text(
        '{"log_path": "%s", "file_prefix": "exp"}' % log_dir.as_posix(),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from user environment and marker overrides."""
    monkeypatch.delenv("RQ_LOG_PATH", raising=False)
    monkeypatch.delenv("RQ_FILE_PREFIX", raising=False)
    game_data.reset_markers()
    yield
    game_data.reset_markers()
