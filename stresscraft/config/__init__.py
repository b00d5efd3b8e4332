"""Configuration management for StressCraft."""

from .loader import ConfigLoader, ConfigurationError
from .models import (
    GeneratorsConfig,
    IntrospectionConfig,
    LoggingConfig,
    StressCraftConfig,
)

__all__ = [
    "StressCraftConfig",
    "IntrospectionConfig",
    "GeneratorsConfig",
    "LoggingConfig",
    "ConfigLoader",
    "ConfigurationError",
]
