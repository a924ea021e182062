"""
Configuration management for the live scoreboard.
Supports both JSON file configuration and environment variable overrides.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure package logging.

    Leaves an already configured root logger alone apart from the package
    level.

    @param level: Level name, e.g. "DEBUG"; unknown names fall back to INFO
    """
    level_name = str(level).upper()
    if level_name not in LOG_LEVELS:
        level_name = "INFO"
    numeric_level = getattr(logging, level_name)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=numeric_level, format=LOG_FORMAT)

    logging.getLogger("live_scoreboard").setLevel(numeric_level)


class ScoreboardConfig:
    """Configuration management for the live scoreboard."""

    DEFAULT_CONFIG = {
        "board_name": "Live Football World Cup Score Board",
        "summary": {
            "show_header": True,
            "max_entries": 0,  # 0 means no limit
        },
        "logging": {
            "level": "INFO",
        },
    }

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
    ) -> None:
        """Initialize configuration from file, environment variables, or defaults."""
        self.config_path = Path(config_path) if config_path is not None else None
        self.config = self._load_config()
        self._apply_env_overrides()
        self._validate_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from JSON file or create default.

        @return: Dictionary containing the loaded configuration
        """
        config = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path is None:
            return config

        if not self.config_path.exists():
            self._create_default_config()
            return config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                loaded_config = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(
                "Error loading config from %s: %s; using defaults", self.config_path, e
            )
            return config

        if not isinstance(loaded_config, dict):
            logger.warning(
                "Config file %s does not hold an object; using defaults",
                self.config_path,
            )
            return config

        self._deep_merge(config, loaded_config)
        return config

    def _deep_merge(
        self,
        base_dict: Dict[str, Any],
        update_dict: Dict[str, Any],
    ) -> None:
        """
        Recursively merge dictionaries.

        @param base_dict: Base dictionary to merge into
        @param update_dict: Dictionary with updates to merge
        """
        for key, value in update_dict.items():
            if (
                key in base_dict
                and isinstance(base_dict[key], dict)
                and isinstance(value, dict)
            ):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value

    def _apply_env_overrides(self) -> None:
        """
        Apply environment variable overrides to configuration.
        """
        env_mappings = {
            "BOARD_NAME": (("board_name",), str),
            "SHOW_HEADER": (("summary", "show_header"), bool),
            "SUMMARY_MAX_ENTRIES": (("summary", "max_entries"), int),
            "LOG_LEVEL": (("logging", "level"), str),
        }

        for env_var, (config_path, value_type) in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value is not None:
                self._set_nested_config(
                    config_path, self._convert_env_value(env_value, value_type)
                )

    def _convert_env_value(
        self,
        value: str,
        value_type: type,
    ) -> Any:
        """
        Convert environment variable string to the type of its option.

        Values that do not parse are returned unchanged and left to validation.

        @param value: String value from environment variable
        @param value_type: bool, int or str
        @return: Converted value
        """
        if value_type is bool:
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            elif value.lower() in ("false", "0", "no", "off"):
                return False
            return value

        if value_type is int:
            try:
                return int(value)
            except ValueError:
                return value

        return value

    def _set_nested_config(self, path: tuple, value: Any) -> None:
        current = self.config
        for key in path[:-1]:
            if not isinstance(current.get(key), dict):
                current[key] = {}
            current = current[key]
        current[path[-1]] = value

    def _create_default_config(self) -> None:
        """
        Write the default configuration to the configured file path.
        """
        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(self.DEFAULT_CONFIG, f, indent=2)
            logger.info("Created default configuration file: %s", self.config_path)
        except OSError as e:
            logger.warning("Could not create config file %s: %s", self.config_path, e)

    def _validate_config(self) -> None:
        """
        Validate configuration values.

        Invalid values are replaced with defaults.
        """
        max_entries = self.get("summary", "max_entries")
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries < 0:
            logger.warning("Invalid summary.max_entries %r, using 0", max_entries)
            self._set_nested_config(("summary", "max_entries"), 0)

        level = self.get("logging", "level")
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            logger.warning("Invalid logging.level %r, using 'INFO'", level)
            self._set_nested_config(("logging", "level"), "INFO")
        else:
            self._set_nested_config(("logging", "level"), level.upper())

        if not isinstance(self.get("board_name"), str):
            logger.warning("Invalid board_name, using default")
            self.config["board_name"] = self.DEFAULT_CONFIG["board_name"]

    def get(
        self,
        *keys: str,
    ) -> Any:
        """
        Get nested configuration value.

        @param keys: Variable arguments representing nested keys to traverse
        @return: Configuration value at the specified path, None if not found
        """
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return None
        return value

    def is_enabled(
        self,
        section: str,
        name: str,
    ) -> bool:
        """
        Check if a boolean option is switched on.

        @param section: Config section, e.g. "summary"
        @param name: Option name within the section
        @return: True only if the option is exactly True
        """
        return self.get(section, name) is True

    def save_config(self) -> bool:
        """
        Save current configuration to file.

        @return: True if saved successfully, False on error or without a path
        """
        if self.config_path is None:
            return False

        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(self.config, f, indent=2)
            return True
        except OSError as e:
            logger.warning("Could not save config file %s: %s", self.config_path, e)
            return False
