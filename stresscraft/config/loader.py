"""Configuration loader for StressCraft."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import StressCraftConfig, deep_merge

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class ConfigLoader:
    """Configuration loader that merges TOML/YAML files, environment variables, and CLI arguments."""

    DEFAULT_CONFIG_FILES = [
        ".stresscraft.toml",  # TOML files (preferred)
        ".stresscraft.yml",
        ".stresscraft.yaml",
        "stresscraft.toml",
        "stresscraft.yml",
        "stresscraft.yaml",
    ]

    ENV_PREFIX = "STRESSCRAFT_"

    # Read directly by the CLI, not configuration keys
    ENV_RESERVED = {"STRESSCRAFT_QUIET"}

    def __init__(self, config_file: str | Path | None = None):
        """Initialize the configuration loader.

        Args:
            config_file: Path to configuration file. If None, will search for default files.
        """
        self.config_file = Path(config_file) if config_file else None

    def load_config(
        self,
        cli_overrides: dict[str, Any] | None = None,
    ) -> StressCraftConfig:
        """Load configuration from all sources.

        Args:
            cli_overrides: CLI argument overrides

        Returns:
            Validated StressCraft configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            config_dict: dict[str, Any] = {}

            # 1. Load from configuration file (TOML or YAML)
            file_config = self._load_config_file()
            if file_config:
                config_dict = deep_merge(config_dict, file_config)
                logger.debug(
                    f"Loaded configuration from {self._get_config_file_path()}"
                )

            # 2. Apply environment variable overrides
            env_config = self._load_env_config()
            if env_config:
                config_dict = deep_merge(config_dict, env_config)
                logger.debug("Applied environment variable overrides")

            # 3. Apply CLI overrides (highest priority)
            if cli_overrides:
                config_dict = deep_merge(config_dict, cli_overrides)
                logger.debug("Applied CLI argument overrides")

            # 4. Validate and create Pydantic model
            config = StressCraftConfig(**config_dict)
            logger.debug("Configuration loaded and validated successfully")

            return config

        except ConfigurationError:
            raise
        except ValidationError as e:
            error_msg = f"Configuration validation failed: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e
        except Exception as e:
            error_msg = f"Failed to load configuration: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

    def _load_config_file(self) -> dict[str, Any] | None:
        """Load configuration from TOML or YAML file."""
        config_file = self._get_config_file_path()

        if not config_file or not config_file.exists():
            logger.debug("No configuration file found, using defaults")
            return None

        try:
            if config_file.suffix.lower() == ".toml":
                return self._load_toml_file(config_file)
            elif config_file.suffix.lower() in (".yml", ".yaml"):
                return self._load_yaml_file(config_file)
            else:
                logger.warning(f"Unknown configuration file type: {config_file}")
                return None

        except OSError as e:
            error_msg = f"Failed to read {config_file}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

    def _load_toml_file(self, config_file: Path) -> dict[str, Any] | None:
        """Load configuration from TOML file."""
        try:
            with open(config_file, "rb") as f:
                content = tomllib.load(f)

            if not content:
                logger.warning(f"Configuration file {config_file} is empty")
                return None

            return content

        except tomllib.TOMLDecodeError as e:
            error_msg = f"Invalid TOML in {config_file}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

    def _load_yaml_file(self, config_file: Path) -> dict[str, Any] | None:
        """Load configuration from YAML file."""
        try:
            with open(config_file, encoding="utf-8") as f:
                content = yaml.safe_load(f)

            if not content:
                logger.warning(f"Configuration file {config_file} is empty")
                return None

            if not isinstance(content, dict):
                raise ConfigurationError(
                    f"Configuration file {config_file} must contain a mapping"
                )

            return content

        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML in {config_file}: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

    def _load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: dict[str, Any] = {}

        for key, value in os.environ.items():
            if key.startswith(self.ENV_PREFIX) and key not in self.ENV_RESERVED:
                config_key = key[len(self.ENV_PREFIX) :].lower()

                # e.g., STRESSCRAFT_LOGGING__LEVEL -> logging.level
                nested_keys = config_key.replace("__", ".").split(".")

                parsed_value = self._parse_env_value(value)
                self._set_nested_value(env_config, nested_keys, parsed_value)

        return env_config

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value to appropriate Python type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        elif value.lower() in ("false", "no", "off"):
            return False

        try:
            if "." not in value:
                return int(value)
            else:
                return float(value)
        except ValueError:
            pass

        if "," in value:
            return [item.strip() for item in value.split(",")]

        return value

    def _set_nested_value(self, config: dict[str, Any], keys: list, value: Any) -> None:
        """Set a nested value in the configuration dictionary."""
        current = config

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def _get_config_file_path(self) -> Path | None:
        """Get the path to the configuration file."""
        if self.config_file:
            return self.config_file

        for filename in self.DEFAULT_CONFIG_FILES:
            path = Path(filename)
            if path.exists():
                return path

        return None

