"""Configuration loader for httphelper.

Settings come from an injected dictionary, a YAML file, or the built-in
defaults, and are exposed through a singleton config object.
"""

import copy
from pathlib import Path
from typing import Any, cast

import yaml

from httphelper.exceptions import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "http": {
        # None leaves timeout handling to requests (blocks until the server answers)
        "timeouts": {"request": None},
        "headers": {"user_agent": "httphelper/0.1.0"},
    },
}


class Config:
    """Configuration manager that loads and provides access to library settings."""

    def __init__(self, config_dict: dict[str, Any] | None = None, config_path: Path | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, no file is read and no defaults are merged.
            config_path: Optional YAML file whose values are merged over the defaults.
        """
        self._configs: dict[str, Any]
        self._config_path: Path | None = config_path

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
        else:
            self._configs = {}
            self._load()

    def _load(self):
        """Load defaults, then overlay the YAML file if one was given."""
        self._configs = copy.deepcopy(DEFAULT_CONFIG)

        if self._config_path is None:
            return

        if not self._config_path.exists():
            raise ConfigurationError(f"Config file not found at {self._config_path}")

        with open(self._config_path, encoding="utf-8") as f:
            loaded_config = yaml.safe_load(f)

        if loaded_config is None:
            return

        if not isinstance(loaded_config, dict):
            raise ConfigurationError(
                f"Config file {self._config_path.name} must contain a dictionary, "
                f"got {type(loaded_config).__name__}"
            )

        _deep_merge(self._configs, loaded_config)

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "http.timeouts.request")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("http.headers.user_agent")
            "httphelper/0.1.0"
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def http(self) -> dict[str, Any]:
        """Get HTTP configuration."""
        return cast(dict[str, Any], self._configs.get("http", {}))

    def reload(self):
        """Reload defaults and the configuration file."""
        self._configs.clear()
        self._load()


def _deep_merge(base_dict: dict[str, Any], override_dict: dict[str, Any]) -> None:
    """Recursively merge override_dict into base_dict"""
    for key, value in override_dict.items():
        if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
            _deep_merge(base_dict[key], value)
        else:
            base_dict[key] = value


# Create a singleton instance
config = Config()
