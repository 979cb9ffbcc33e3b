"""
Configuration settings for the morphology filter
Structured configuration classes with validation and type hints
"""

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, TypeVar

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_MORPH_CACHE_SIZE,
    DEFAULT_PRESERVE_MORPHOLOGY_FLAG,
    SUPPORTED_LANGUAGES,
)
from ..constants import LOGGING_CONFIG as LOG_CONSTANTS
from ..exceptions import ConfigurationError

T = TypeVar("T")


class MorphologyFilterConfig(BaseModel):
    """Morphology filter settings"""

    model_config = {"validate_assignment": True}

    use_preserve_flag: bool = Field(default_factory=lambda: os.getenv("MORPH_FILTER_USE_PRESERVE_FLAG", "false").lower() == "true")
    preserve_morphology_flag: int = Field(default_factory=lambda: int(os.getenv("MORPH_FILTER_PRESERVE_FLAG", str(DEFAULT_PRESERVE_MORPHOLOGY_FLAG))), validate_default=True)

    @field_validator("preserve_morphology_flag")
    @classmethod
    def validate_preserve_flag(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("preserve_morphology_flag must be a positive bitmask")
        return value


class MorphologyConfig(BaseModel):
    """Morphology backend settings"""

    model_config = {"validate_assignment": True}

    language: str = Field(default_factory=lambda: os.getenv("MORPH_FILTER_LANGUAGE", DEFAULT_LANGUAGE), validate_default=True)
    cache_size: int = Field(default_factory=lambda: int(os.getenv("MORPH_FILTER_CACHE_SIZE", str(DEFAULT_MORPH_CACHE_SIZE))), validate_default=True)

    @field_validator("language")
    @classmethod
    def validate_language(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language '{value}', expected one of {SUPPORTED_LANGUAGES}")
        return value

    @field_validator("cache_size")
    @classmethod
    def validate_cache_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("cache_size must be positive")
        return value


@dataclass
class LoggingConfig:
    """Logging configuration settings, applied by ``Config.configure_logging``"""

    level: str = LOG_CONSTANTS["default_level"]
    format: str = LOG_CONSTANTS["format"]
    date_format: str = LOG_CONSTANTS["date_format"]
    environment: str = "development"

    def __post_init__(self):
        """Post-initialization setup"""
        if self.environment == "production":
            self.level = "WARNING"
        elif self.environment == "testing":
            self.level = "DEBUG"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "level": self.level,
            "format": self.format,
            "date_format": self.date_format,
            "environment": self.environment,
        }


def build_settings(factory: Callable[..., T], **values: Any) -> T:
    """Instantiate a settings model, converting validation failures to ConfigurationError"""
    try:
        return factory(**values)
    except PydanticValidationError as exc:
        raise ConfigurationError(
            f"Invalid {factory.__name__}",
            details={"errors": exc.errors(include_url=False, include_context=False)},
        ) from exc
    except ValueError as exc:
        # Raised by environment defaults that fail to parse
        raise ConfigurationError(f"Invalid {factory.__name__}: {exc}") from exc
