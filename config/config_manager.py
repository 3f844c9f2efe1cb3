"""Configuration management for googleapis-wire.

Configuration is stored as YAML in ~/.googleapis-wire/config.yaml.
Environment variables override values from the file:

    GOOGLE_APPLICATION_CREDENTIALS  -> credentials_path
    GAPI_WIRE_LOG_LEVEL             -> log_level
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

CREDENTIALS_ENV = "GOOGLE_APPLICATION_CREDENTIALS"
LOG_LEVEL_ENV = "GAPI_WIRE_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(Exception):
    """Raised when configuration operations fail."""

    pass


class ClientConfig(BaseModel):
    """Settings shared by every API client.

    Attributes:
        credentials_path: Service account key file; Application Default
            Credentials are used when unset.
        scopes: OAuth scopes to request instead of each client's defaults.
        base_urls: Per-API root URL overrides, keyed by API name.
        timeout: Socket timeout in seconds.
        log_level: Root logging level for the command line tool.
    """

    credentials_path: Optional[str] = None
    scopes: list[str] = Field(default_factory=list)
    base_urls: dict[str, str] = Field(default_factory=dict)
    timeout: Optional[float] = None
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value


class ConfigManager:
    """Loads and saves ClientConfig as YAML.

    Attributes:
        config_dir: Path to the configuration directory.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".googleapis-wire"
    CONFIG_FILE = "config.yaml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize the configuration manager.

        Args:
            config_dir: Custom configuration directory path.
        """
        self.config_dir = Path(config_dir) if config_dir else self.DEFAULT_CONFIG_DIR
        self._config: Optional[ClientConfig] = None

    @property
    def config_path(self) -> Path:
        """Path to the YAML configuration file."""
        return self.config_dir / self.CONFIG_FILE

    def load(self) -> ClientConfig:
        """Load configuration from disk, applying environment overrides.

        A missing file is not an error: defaults plus environment are used.

        Raises:
            ConfigError: If the file is not valid YAML or fails validation.
        """
        data: dict[str, Any] = {}
        if self.config_path.exists():
            try:
                data = yaml.safe_load(self.config_path.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid configuration format in {self.config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Configuration in {self.config_path} must be a mapping")
        else:
            logger.debug(f"No configuration at {self.config_path}, using defaults")

        data.update(self._env_overrides())
        try:
            self._config = ClientConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        return self._config

    def _env_overrides(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        if os.environ.get(CREDENTIALS_ENV):
            overrides["credentials_path"] = os.environ[CREDENTIALS_ENV]
        if os.environ.get(LOG_LEVEL_ENV):
            overrides["log_level"] = os.environ[LOG_LEVEL_ENV]
        return overrides

    def save(self, config: ClientConfig) -> None:
        """Write configuration to disk.

        Raises:
            ConfigError: If the file cannot be written.
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(
                yaml.safe_dump(config.model_dump(exclude_none=True), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e
        self._config = config
        logger.info(f"Configuration saved to {self.config_path}")

    def get_config(self) -> ClientConfig:
        """Get the current configuration, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def update(self, **kwargs: Any) -> ClientConfig:
        """Update specific configuration values and save.

        Args:
            **kwargs: ClientConfig fields to update.

        Raises:
            ConfigError: If the updated values fail validation.
        """
        current = self.get_config().model_dump()
        current.update(kwargs)
        try:
            config = ClientConfig(**current)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        self.save(config)
        return config
