"""
Unit tests for configuration loading.
"""

import json
import pytest
from pathlib import Path

from rq_mobcounter.config import game_data
from rq_mobcounter.config.loader import ConfigLoader, load_settings
from rq_mobcounter.config.settings import (
    DEFAULT_FILE_EXTENSION,
    DEFAULT_FILE_PREFIX,
    LogSettings,
    normalize_path,
)
from rq_mobcounter.exceptions import ConfigError
from rq_mobcounter.parser import ChatLogParser


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no home config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
    return tmp_path


class TestLoadConfig:
    """Test config file discovery and parsing."""

    def test_missing_file_returns_empty(self, isolated_cwd, caplog):
        config = ConfigLoader.load_config("non_existent_file.yaml")
        assert config == {}
        assert "config.json not found" in caplog.text

    def test_json_file(self, config_file, log_dir):
        config = ConfigLoader.load_config(str(config_file))
        assert config == {"log_path": log_dir.as_posix(), "file_prefix": "exp"}

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "rq_mobcounter.yaml"
        path.write_text("log_path: /srv/logs\nfile_prefix: kills\n", encoding="utf-8")
        assert ConfigLoader.load_config(str(path)) == {
            "log_path": "/srv/logs",
            "file_prefix": "kills",
        }

    def test_config_json_in_working_directory(self, isolated_cwd):
        (isolated_cwd / "config.json").write_text('{"file_prefix": "cwd"}', encoding="utf-8")
        assert ConfigLoader.load_config() == {"file_prefix": "cwd"}

    def test_broken_file_raises(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"log_path": [unclosed', encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigLoader.load_config(str(path))

    def test_non_mapping_raises(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ConfigLoader.load_config(str(path))


class TestApplyConfig:
    """Test building settings from config values."""

    def test_defaults(self):
        settings = ConfigLoader.apply_config({})
        assert settings == LogSettings()
        assert settings.file_prefix == DEFAULT_FILE_PREFIX
        assert settings.file_extension == DEFAULT_FILE_EXTENSION

    def test_values_applied(self):
        settings = ConfigLoader.apply_config(
            {"log_path": "/srv/logs", "file_prefix": "kills", "file_extension": ".html"}
        )
        assert settings.log_path == Path("/srv/logs")
        assert settings.file_prefix == "kills"
        assert settings.file_extension == ".html"

    def test_invalid_values_ignored(self):
        settings = ConfigLoader.apply_config({"log_path": 42, "file_prefix": ""})
        assert settings == LogSettings()

    def test_marker_overrides(self):
        ConfigLoader.apply_config({"markers": {"death_marker": "dies", "bogus": "x"}})
        assert game_data.get_death_marker() == "dies"
        assert "bogus" not in game_data.LOG_MARKERS

    @pytest.mark.parametrize("pattern", ["Получено опыт(а", "([", r"Получено опыта: \d+"])
    def test_invalid_exp_pattern_ignored(self, pattern, caplog):
        """Test that broken or group-less experience patterns are not applied."""
        ConfigLoader.apply_config({"markers": {"exp_pattern": pattern}})

        assert game_data.get_exp_regex().pattern == game_data.EXP_PATTERN
        assert "exp_pattern" in caplog.text

    def test_invalid_exp_pattern_keeps_parser_working(self, sample_log_html):
        ConfigLoader.apply_config({"markers": {"exp_pattern": "Получено опыт(а"}})

        events = ChatLogParser().parse_text(sample_log_html)
        assert sum(e.exp_gained for e in events) == 3173

    def test_valid_exp_pattern_applied(self):
        ConfigLoader.apply_config({"markers": {"exp_pattern": r"Опыт \+(\d+)"}})
        assert game_data.get_exp_regex().pattern == r"Опыт \+(\d+)"

    def test_settings_are_immutable(self):
        settings = ConfigLoader.apply_config({})
        with pytest.raises(AttributeError):
            settings.file_prefix = "other"


class TestSettings:
    """Test environment overrides and path handling."""

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RQ_LOG_PATH", "/var/rq")
        monkeypatch.setenv("RQ_FILE_PREFIX", "mobs")
        settings = LogSettings.from_env(LogSettings(file_prefix="exp"))
        assert settings.log_path == Path("/var/rq")
        assert settings.file_prefix == "mobs"

    def test_env_missing_keeps_base(self):
        base = LogSettings(log_path=Path("/a"), file_prefix="b")
        assert LogSettings.from_env(base) == base

    def test_load_settings(self, config_file, log_dir):
        settings = load_settings(str(config_file))
        assert settings.log_path == log_dir
        assert settings.file_prefix == "exp"

    def test_windows_path_normalized(self):
        path = normalize_path(r"D:\B.A.S.E\Games\Royal Quest\chatlogs")
        assert path.name == "chatlogs"


class TestSaveConfig:
    """Test writing config files."""

    def test_save_and_reload(self, tmp_path):
        settings = LogSettings(log_path=tmp_path / "logs", file_prefix="exp")
        path = ConfigLoader.save_config(settings, str(tmp_path / "config.json"))

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == {"log_path": str(tmp_path / "logs"), "file_prefix": "exp"}
        assert load_settings(str(path)) == settings

    def test_save_to_missing_directory(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigLoader.save_config(LogSettings(), str(tmp_path / "nope" / "config.json"))
