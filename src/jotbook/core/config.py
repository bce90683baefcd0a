"""
Hierarchical configuration management.

Loads configuration from multiple sources with this precedence (highest wins):
    1. Environment variables (PREFIX_SECTION__KEY)
    2. Config file (YAML or JSON)
    3. Built-in defaults

Usage:
    config = Config()
    config = Config(config_file="~/.jotbook/config.yaml", data_dir="/tmp/journal")

    config.get("storage.key")        # dot-notation access
    config.get("paths.storage_dir")  # returns resolved path
"""

import json
import os
from typing import Any

import yaml

from .exceptions import ConfigurationError

_DEFAULT_ENV_PREFIX = "JOTBOOK_"
_DEFAULT_DATA_DIR_NAME = ".jotbook-data"
DEFAULT_STORAGE_KEY = "journal_entries_v2"


class Config:
    """
    Central configuration manager.

    Loads and merges configuration from defaults, a config file, and
    environment variables. Env vars use double-underscore to denote nesting:
    JOTBOOK_VIEW__SORT_ORDER=asc -> config["view"]["sort_order"] = "asc"
    """

    def __init__(
        self,
        config_file: str | None = None,
        env_prefix: str = _DEFAULT_ENV_PREFIX,
        data_dir: str | None = None,
        defaults: dict[str, Any] | None = None,
    ):
        """
        Args:
            config_file: Path to YAML or JSON configuration file.
            env_prefix: Prefix for environment variable overrides.
            data_dir: Base directory for journal data. Defaults to ~/.jotbook-data.
            defaults: Additional default values to merge.
        """
        self.config_file = os.path.expanduser(config_file) if config_file else None
        self.env_prefix = env_prefix or ""
        self._data_dir = data_dir or os.path.join("~", _DEFAULT_DATA_DIR_NAME)
        self._extra_defaults = defaults or {}
        self.config_data: dict[str, Any] = {}

        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from all sources."""
        self.config_data = self._get_default_config()

        if self._extra_defaults:
            self._update_dict(self.config_data, self._extra_defaults)

        if self.config_file and os.path.exists(self.config_file):
            file_config = self._load_file(self.config_file)
            self._update_dict(self.config_data, file_config)

        # Env vars override everything
        self._load_from_env()

    def _get_default_config(self) -> dict[str, Any]:
        data_dir = os.path.expanduser(self._data_dir)
        return {
            "paths": {
                "data_dir": data_dir,
                "storage_dir": os.path.join(data_dir, "storage"),
                "export_dir": os.path.join(data_dir, "exports"),
                "log_dir": os.path.join(data_dir, "logs"),
            },
            "storage": {
                "key": DEFAULT_STORAGE_KEY,
            },
            "view": {
                "sort_order": "desc",
            },
            "logging": {
                "level": "WARNING",
                "to_file": True,
            },
        }

    @staticmethod
    def _load_file(path: str) -> dict[str, Any]:
        """Load a YAML or JSON config file."""
        ext = os.path.splitext(path)[1].lower()
        try:
            with open(path) as f:
                if ext in (".yaml", ".yml"):
                    data = yaml.safe_load(f) or {}
                elif ext == ".json":
                    data = json.load(f)
                else:
                    return {}
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot parse config file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        return data

    def _update_dict(self, target: dict, source: dict) -> None:
        """Recursively merge source into target."""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._update_dict(target[key], value)
            else:
                target[key] = value

    def _load_from_env(self) -> None:
        """Override config values from environment variables."""
        if not self.env_prefix:
            return
        for env_key, env_value in os.environ.items():
            if not env_key.startswith(self.env_prefix):
                continue
            config_key = env_key[len(self.env_prefix) :].lower()
            key_parts = config_key.split("__")

            current = self.config_data
            for part in key_parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]
            current[key_parts[-1]] = env_value

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Args:
            key_path: e.g. "paths.storage_dir", "view.sort_order"
            default: Returned when key is not found.
        """
        parts = key_path.split(".")
        current = self.config_data
        for part in parts:
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key_path: str, value: Any) -> None:
        """Set a config value by dot-notation path, creating intermediate dicts."""
        parts = key_path.split(".")
        current = self.config_data
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value

    def get_path(self, name: str) -> str:
        """Return a resolved ``paths.<name>`` entry.

        Raises:
            ConfigurationError: If the path is not configured.
        """
        value = self.get(f"paths.{name}")
        if not value or not isinstance(value, str):
            raise ConfigurationError(f"Missing path setting: paths.{name}")
        return os.path.expanduser(value)

    def get_bool(self, key_path: str, default: bool = False) -> bool:
        """Get a flag. Env overrides arrive as strings, so "false", "0", "no" and "" are False."""
        value = self.get(key_path, default)
        if isinstance(value, str):
            return value.strip().lower() not in ("", "0", "false", "no", "off")
        return bool(value)
