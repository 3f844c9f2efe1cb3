"""Configuration module.

This module provides YAML-backed client settings with environment
overrides.
"""

from .config_manager import ClientConfig, ConfigError, ConfigManager

__all__ = ["ClientConfig", "ConfigManager", "ConfigError"]
