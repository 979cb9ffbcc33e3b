"""
Configuration module for the morphology filter
Centralized configuration management with environment-specific settings
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from ..utils.logging_config import setup_logging
from .settings import LoggingConfig, MorphologyConfig, MorphologyFilterConfig, build_settings


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a configuration section, empty when absent"""
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{name}' must be a mapping, got {type(section).__name__}",
            details={"section": name},
        )
    return section


class Config:
    """Main configuration class"""

    def __init__(
        self,
        environment: Optional[str] = None,
        filter: Optional[MorphologyFilterConfig] = None,
        morphology: Optional[MorphologyConfig] = None,
    ):
        """
        Initialize configuration

        Args:
            environment: Environment name (development, testing, production)
            filter: Morphology filter settings, read from the environment when omitted
            morphology: Morphology backend settings, read from the environment when omitted
        """
        self.environment = environment or os.getenv("APP_ENV", "development")
        self.filter = filter if filter is not None else build_settings(MorphologyFilterConfig)
        self.morphology = morphology if morphology is not None else build_settings(MorphologyConfig)
        self.logging = LoggingConfig(environment=self.environment)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], environment: Optional[str] = None) -> "Config":
        """
        Build configuration from a mapping with ``filter`` and ``morphology`` sections

        Missing keys fall back to the environment defaults.
        """
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")
        return cls(
            environment=environment or data.get("environment"),
            filter=build_settings(MorphologyFilterConfig, **_section(data, "filter")),
            morphology=build_settings(MorphologyConfig, **_section(data, "morphology")),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path], environment: Optional[str] = None) -> "Config":
        """Load configuration from a YAML file"""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as exc:
            raise ConfigurationError(f"File not found: {path}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
        return cls.from_dict(data, environment=environment)

    def configure_logging(self, config_path: Optional[str] = None) -> None:
        """Apply the logging settings of this environment"""
        setup_logging(
            config_path=config_path,
            log_level=self.logging.level,
            log_format=self.logging.format,
            date_format=self.logging.date_format,
        )

    def get_all_config(self) -> Dict[str, Any]:
        """Get all configuration as dictionary"""
        return {
            "environment": self.environment,
            "filter": self.filter.model_dump(),
            "morphology": self.morphology.model_dump(),
            "logging": self.logging.to_dict(),
        }


__all__ = [
    "Config",
    "LoggingConfig",
    "MorphologyConfig",
    "MorphologyFilterConfig",
    "build_settings",
]
