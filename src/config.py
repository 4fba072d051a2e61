"""
Configuration management using Pydantic for the photofx effects engine.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.constants import StripConstants, SystemConstants
from core.enums import EffectMode

logger = logging.getLogger(__name__)


class EffectsConfig(BaseSettings):
    """Effect behavior configuration."""

    default_mode: EffectMode = Field(
        default=EffectMode.LEGACY,
        description="Variant used by effects with a historical quirk (primary, halftone)",
    )
    strip_color: Tuple[int, int, int] = Field(
        default=StripConstants.DEFAULT_COLOR, description="RGB color painted by strip overlays"
    )
    strip_alpha: int = Field(
        default=StripConstants.DEFAULT_ALPHA, ge=0, le=255, description="Alpha of strip bands"
    )
    log_timing: bool = Field(default=True, description="Log effect durations at DEBUG level")

    @field_validator("strip_color")
    @classmethod
    def validate_strip_color(cls, v):
        """Ensure every channel fits in a byte."""
        if any(c < 0 or c > 255 for c in v):
            raise ValueError(f"Invalid strip color: {v}. Channels must be in [0, 255]")
        return v

    model_config = SettingsConfigDict(env_prefix="PHOTOFX_EFFECTS_", extra="ignore")


class SystemConfig(BaseSettings):
    """System configuration."""

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = SystemConstants.VALID_LOG_LEVELS
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    model_config = SettingsConfigDict(env_prefix="PHOTOFX_SYSTEM_", extra="ignore")


SECTIONS = {"effects": EffectsConfig, "system": SystemConfig}


class Settings(BaseSettings):
    """Main library settings."""

    # Sub-configurations
    effects: EffectsConfig = Field(default_factory=EffectsConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Environment
    environment: str = Field(
        default="production", description="Environment (development, staging, production)"
    )

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("PHOTOFX_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            import yaml

            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")
                return values

            for key, value in file_config.items():
                if values.get(key) is not None:
                    continue
                section = SECTIONS.get(key)
                if section is not None and isinstance(value, dict):
                    # Section env vars (PHOTOFX_EFFECTS_*, ...) win over the file
                    value = {**value, **section().model_dump(exclude_unset=True)}
                values[key] = value
            logger.debug(f"Loaded config file {config_file}")

        return values

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        valid_envs = SystemConstants.VALID_ENVIRONMENTS
        if v not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of {valid_envs}")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(mode="json", exclude_none=True)

    def save_to_file(self, path: str) -> None:
        """Save current configuration to YAML file."""
        import yaml

        config_dict = self.to_dict()
        with open(path, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False)

    model_config = SettingsConfigDict(
        env_prefix="PHOTOFX_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logging from settings.

    The library never calls this on import; hosts call it once at startup.

    Args:
        settings: Settings to use, defaults to the cached settings
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.system.debug else getattr(logging, settings.system.log_level)
    logging.basicConfig(level=level, format=SystemConstants.LOG_FORMAT)
    logger.debug(f"Logging configured at level {logging.getLevelName(level)}")
