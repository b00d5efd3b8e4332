"""Configuration models for StressCraft."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IntrospectionConfig(BaseModel):
    """Configuration for discovering operations on test classes."""

    expose_parameter_names: bool = Field(
        default=False,
        description="Use declared parameter names as generator names when nothing else is configured",
    )

    include_inherited: bool = Field(
        default=False,
        description="Also collect operations and declarations from base classes",
    )


class GeneratorsConfig(BaseModel):
    """Configuration for parameter generators."""

    plugins: dict[str, str] = Field(
        default_factory=dict,
        description="Extra generator kinds, mapping kind id to 'module:attribute'",
    )

    @field_validator("plugins")
    @classmethod
    def validate_plugin_paths(cls, v):
        """Ensure plugin import paths look like 'module:attribute'."""
        for kind, path in v.items():
            module, _, attribute = path.partition(":")
            if not kind or not module or not attribute:
                raise ValueError(
                    f"Plugin '{kind}' should map to 'module:attribute', got {path!r}"
                )
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging behavior."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Root log level when neither --verbose nor --quiet is given"
    )

    suppress_modules: list[str] = Field(
        default_factory=list,
        description="External library modules to keep at WARNING in non-verbose mode",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class StressCraftConfig(BaseModel):
    """Main configuration model for StressCraft."""

    introspection: IntrospectionConfig = Field(
        default_factory=IntrospectionConfig,
        description="Operation discovery configuration",
    )

    generators: GeneratorsConfig = Field(
        default_factory=GeneratorsConfig,
        description="Parameter generator configuration",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging behavior configuration",
    )

    model_config = ConfigDict(validate_assignment=True, extra="forbid")


def deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    """Deeply merge updates into base dictionary."""
    result = base.copy()

    for key, value in updates.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
