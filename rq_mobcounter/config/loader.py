"""
Configuration loader for chat log locations.

Allows users to point the counter at their chat log folder via a YAML or
JSON configuration file.
"""

import json
import re
import yaml
import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Any, List

from . import game_data
from .settings import LogSettings, normalize_path
from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


EXAMPLE_CONFIG = """{
  "log_path": "D:\\\\B.A.S.E\\\\Games\\\\Royal Quest\\\\chatlogs",
  "file_prefix": "exp"
}"""


class ConfigLoader:
    """Loads and applies configuration from YAML/JSON files."""

    @staticmethod
    def search_paths(config_path: Optional[str] = None) -> List[Path]:
        """
        Candidate config file locations, most specific first.

        Args:
            config_path: Explicit config file path, checked before the defaults
        """
        paths = [
            Path("config.json"),
            Path("rq_mobcounter.yaml"),
            Path.home() / ".rq_mobcounter" / "config.yaml",
            Path(__file__).resolve().parent.parent / "config.json",
        ]
        if config_path:
            paths.insert(0, Path(config_path))
        return paths

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from the first config file found.

        JSON is a subset of YAML, so both config.json and *.yaml files are
        read with the YAML loader.

        Args:
            config_path: Path to custom config file

        Returns:
            Configuration dictionary, empty when no file was found

        Raises:
            ConfigError: If a config file exists but cannot be parsed
        """
        for path in ConfigLoader.search_paths(config_path):
            if not path.is_file():
                continue
            try:
                with open(path, "r", encoding="utf-8") as f:
                    config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Failed to load config from {path}: {e}") from e

            if not isinstance(config, dict):
                raise ConfigError(f"Config file {path} must contain a mapping")

            logger.info(f"Loaded configuration from {path}")
            return config

        logger.warning(
            "config.json not found, using defaults. Create config.json with:\n"
            f"{EXAMPLE_CONFIG}"
        )
        return {}

    @staticmethod
    def apply_config(config: Dict[str, Any], base: Optional[LogSettings] = None) -> LogSettings:
        """
        Build settings from a configuration dictionary.

        Args:
            config: Configuration dictionary from YAML/JSON
            base: Settings to start from (defaults if omitted)

        Returns:
            LogSettings with the configured values applied
        """
        settings = base or LogSettings()

        for key in ("log_path", "file_prefix", "file_extension"):
            if key not in config:
                continue
            value = config[key]
            if not isinstance(value, str) or not value:
                logger.warning(f"Invalid {key} in config: {value!r}")
                continue
            if key == "log_path":
                settings = replace(settings, log_path=normalize_path(value))
            else:
                settings = replace(settings, **{key: value})
            logger.debug(f"Configured {key} = {value}")

        # Custom log text markers
        markers = config.get("markers") or {}
        if not isinstance(markers, dict):
            logger.warning(f"Invalid markers section in config: {markers!r}")
            markers = {}
        for name, value in markers.items():
            if name not in game_data.LOG_MARKERS:
                logger.warning(f"Unknown marker {name!r} in config")
                continue
            if not isinstance(value, str) or not value:
                logger.warning(f"Invalid value for marker {name}: {value!r}")
                continue
            if name == "exp_pattern" and not _valid_exp_pattern(value):
                continue
            game_data.LOG_MARKERS[name] = value
            logger.debug(f"Custom marker: {name} = {value}")

        return settings

    @staticmethod
    def save_config(settings: LogSettings, config_path: str) -> Path:
        """
        Write settings to a JSON config file.

        Args:
            settings: Settings to persist
            config_path: Destination file

        Returns:
            Path that was written
        """
        path = Path(config_path)
        try:
            path.write_text(
                json.dumps(settings.to_dict(), indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Failed to save config to {path}: {e}") from e

        logger.info(f"Saved configuration to {path}")
        return path


def _valid_exp_pattern(pattern: str) -> bool:
    """Experience patterns must compile and capture the number."""
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        logger.warning(f"Invalid exp_pattern {pattern!r}: {e}")
        return False
    if compiled.groups < 1:
        logger.warning(f"exp_pattern {pattern!r} has no capture group")
        return False
    return True


def load_settings(config_path: Optional[str] = None) -> LogSettings:
    """
    Load config file, apply it, then apply environment overrides.

    Args:
        config_path: Optional path to custom config file
    """
    loader = ConfigLoader()
    config = loader.load_config(config_path)
    settings = loader.apply_config(config)
    return LogSettings.from_env(settings)
