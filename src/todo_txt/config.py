"""Configuration management for todo-txt."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .utils.validation import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TODO_TXT_CONFIG"
DEFAULT_CONFIG_PATH = "~/.config/todo-txt/config.yaml"

_FIELD_TYPES = {
    "todo_file": str,
    "encoding": str,
    "skip_blank_lines": bool,
    "log_level": str,
}


@dataclass
class ConfigModel:
    """Settings for loading and saving todo.txt files."""

    todo_file: str = "~/todo.txt"
    encoding: str = "utf-8"
    skip_blank_lines: bool = True
    log_level: str = "WARNING"

    def __post_init__(self):
        self.todo_file = os.path.expanduser(self.todo_file)

    def get_todo_path(self) -> Path:
        return Path(self.todo_file)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "todo_file": self.todo_file,
            "encoding": self.encoding,
            "skip_blank_lines": self.skip_blank_lines,
            "log_level": self.log_level,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML. Unknown keys are ignored.

        Raises:
            ConfigError: If the document is not valid YAML, not a mapping,
                or holds a value of the wrong type
        """
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", sorted(unknown))

        values = {key: value for key, value in data.items() if key in known}
        for key, value in values.items():
            expected = _FIELD_TYPES[key]
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Config key '{key}' must be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
        return cls(**values)


def get_config_path() -> Path:
    """Config file location, overridable through ``TODO_TXT_CONFIG``."""
    return Path(os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)))


class Config:
    """Configuration manager for todo-txt."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, or defaults if there is none."""
        if cls._instance is not None:
            return cls._instance

        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                config = ConfigModel.from_yaml(f.read())
            logger.debug("Loaded configuration from %s", config_path)
        else:
            config = ConfigModel()
            logger.debug("No configuration at %s, using defaults", config_path)

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(config.to_yaml())
        logger.debug("Configuration saved to %s", config_path)

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
