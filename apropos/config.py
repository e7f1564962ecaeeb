"""
Configuration loader for apropos.

Applications keep the verbs their UI offers and the logging setup in a YAML
file:

    verbs:
      - pick
      - peel
      - eat
    logging:
      level: DEBUG
      format: detailed
      file: logs/apropos.log
"""

import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from apropos.logger import LoggingSettings, configure_logging, get_logger

logger = get_logger(__name__)

# Looked up in the working directory; a missing default file means defaults
DEFAULT_CONFIG_PATH = "apropos.yml"


class ConfigError(Exception):
    """Exception raised for configuration errors."""


class AproposConfig(BaseModel):
    verbs: List[str] = Field(default_factory=list)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("verbs")
    @classmethod
    def _well_formed_verbs(cls, verbs: List[str]) -> List[str]:
        seen = set()
        for verb in verbs:
            if not verb or any(ch.isspace() for ch in verb):
                raise ValueError(f"Verb must be non-empty without whitespace: {verb!r}")
            if verb in seen:
                raise ValueError(f"Duplicate verb: {verb!r}")
            seen.add(verb)
        return verbs


class ConfigManager:
    """
    Class for managing the apropos configuration.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the default path.
        """
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._explicit = config_path is not None
        self._raw: Dict[str, Any] = {}
        self._config = AproposConfig()
        self._loaded = False

    def load(self) -> "ConfigManager":
        """
        Load the configuration from the YAML file.

        Returns:
            Self for method chaining.

        Raises:
            ConfigError: If the configuration file cannot be loaded or parsed.
        """
        if not self._explicit and not os.path.exists(self.config_path):
            logger.debug(f"No configuration at {self.config_path}, using defaults")
            self._raw = {}
            self._config = AproposConfig()
            self._loaded = True
            return self

        try:
            with open(self.config_path, "r") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration from {self.config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Configuration in {self.config_path} must be a mapping")

        try:
            self._config = AproposConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e}") from e

        self._raw = raw
        self._loaded = True
        logger.debug(f"Configuration loaded from {self.config_path}")
        return self

    @property
    def config(self) -> AproposConfig:
        if not self._loaded:
            self.load()
        return self._config

    @property
    def verbs(self) -> List[str]:
        """Get the configured verbs, in file order."""
        return list(self.config.verbs)

    def apply_logging(self) -> None:
        """Configure the apropos logger from the loaded settings."""
        configure_logging(self.config.logging)

    def get_raw_config(self) -> Dict[str, Any]:
        """
        Get the raw configuration dictionary.

        Returns:
            The loaded configuration dictionary.
        """
        if not self._loaded:
            self.load()
        return self._raw
