"""Tests for configuration loading."""

import os

import pytest

from todo_txt.config import (
    Config,
    ConfigModel,
    get_config,
    get_config_path,
    load_config,
    save_config,
)
from todo_txt.utils.validation import ConfigError


class TestConfigModel:
    """Test the configuration model."""

    def test_defaults(self):
        """Test default settings."""
        config = ConfigModel()

        assert config.todo_file == os.path.expanduser("~/todo.txt")
        assert config.encoding == "utf-8"
        assert config.skip_blank_lines is True
        assert config.log_level == "WARNING"

    def test_yaml_round_trip(self):
        """Test YAML serialisation both ways."""
        config = ConfigModel(todo_file="/tmp/work.txt", log_level="DEBUG")
        restored = ConfigModel.from_yaml(config.to_yaml())

        assert restored == config

    def test_unknown_keys_ignored(self):
        """Test that unknown keys are skipped."""
        config = ConfigModel.from_yaml("todo_file: /tmp/x.txt\ntheme: dark\n")
        assert config.todo_file == "/tmp/x.txt"

    def test_empty_document(self):
        """Test an empty YAML document."""
        assert ConfigModel.from_yaml("") == ConfigModel()

    def test_invalid_yaml(self):
        """Test broken YAML."""
        with pytest.raises(ConfigError):
            ConfigModel.from_yaml("todo_file: [unclosed")

    def test_non_mapping(self):
        """Test a YAML document that is not a mapping."""
        with pytest.raises(ConfigError):
            ConfigModel.from_yaml("- a\n- b\n")

    def test_empty_todo_file_value(self):
        """Test that a key with no value is a config error."""
        with pytest.raises(ConfigError, match="todo_file"):
            ConfigModel.from_yaml("todo_file:\n")

    @pytest.mark.parametrize("document", [
        "todo_file: 42\n",
        "encoding: [utf-8]\n",
        "skip_blank_lines: maybe\n",
        "log_level: 10\n",
    ])
    def test_wrong_value_types(self, document):
        """Test that values of the wrong type are config errors."""
        with pytest.raises(ConfigError):
            ConfigModel.from_yaml(document)

    def test_bad_file_raises_on_load(self, tmp_path):
        """Test that loading a bad config file raises a config error."""
        path = tmp_path / "config.yaml"
        path.write_text("todo_file:\n", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(path)


class TestConfigManager:
    """Test loading, caching and saving configuration files."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """Test that a missing file gives defaults without creating one."""
        path = tmp_path / "config.yaml"
        config = load_config(path)

        assert config == ConfigModel()
        assert not path.exists()

    def test_save_and_load(self, tmp_path):
        """Test saving then loading a config file."""
        path = tmp_path / "nested" / "config.yaml"
        save_config(ConfigModel(todo_file="/tmp/saved.txt"), path)

        assert load_config(path).todo_file == "/tmp/saved.txt"

    def test_load_is_cached(self, tmp_path):
        """Test that the loaded config is cached."""
        path = tmp_path / "config.yaml"
        first = load_config(path)

        assert get_config() is first

    def test_reload(self, tmp_path):
        """Test reloading after the file changes."""
        path = tmp_path / "config.yaml"
        load_config(path)
        path.write_text("log_level: DEBUG\n", encoding="utf-8")

        assert Config.reload(path).log_level == "DEBUG"

    def test_env_var_overrides_path(self, tmp_path, monkeypatch):
        """Test the environment variable override."""
        path = tmp_path / "env.yaml"
        path.write_text("encoding: latin-1\n", encoding="utf-8")
        monkeypatch.setenv("TODO_TXT_CONFIG", str(path))

        assert get_config_path() == path
        assert get_config().encoding == "latin-1"
