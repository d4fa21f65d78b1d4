"""Configuration module for loading and accessing library settings."""

from httphelper.exceptions import ConfigurationError

from .loader import DEFAULT_CONFIG, Config, config

__all__ = ["DEFAULT_CONFIG", "Config", "ConfigurationError", "config"]
