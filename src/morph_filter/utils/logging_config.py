"""
Centralized logging configuration for the morphology filter
"""

import os
import logging
import logging.config
import yaml
from pathlib import Path
from typing import Optional

from ..constants import LOGGING_CONFIG as LOG_CONSTANTS


def setup_logging(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    date_format: Optional[str] = None
) -> None:
    """
    Setup centralized logging configuration

    Args:
        config_path: Path to logging configuration YAML file
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the format of every configured formatter
        date_format: Override the date format of every configured formatter
    """
    if config_path is None:
        # Check if custom logging config is specified in environment
        if 'LOGGING_CONFIG' in os.environ:
            config_path = Path(os.environ['LOGGING_CONFIG'])
        else:
            config_path = Path(__file__).parent.parent / "config" / "logging.yml"

    if Path(config_path).exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)

            # Override log level if specified
            if log_level:
                level = getattr(logging, log_level.upper(), logging.INFO)
                config.setdefault('root', {})['level'] = level
                for logger_config in config.get('loggers', {}).values():
                    logger_config['level'] = level

            for formatter_config in config.get('formatters', {}).values():
                if log_format:
                    formatter_config['format'] = log_format
                if date_format:
                    formatter_config['datefmt'] = date_format

            logging.config.dictConfig(config)
            return
        except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
            print(f"Warning: Failed to load logging config: {e}")
            # Fall through to basic config

    logging.basicConfig(
        level=getattr(logging, (log_level or LOG_CONSTANTS["default_level"]).upper(), logging.INFO),
        format=log_format or LOG_CONSTANTS["format"],
        datefmt=date_format or LOG_CONSTANTS["date_format"]
    )

    # Suppress third-party loggers
    for name in LOG_CONSTANTS["quiet_loggers"]:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with proper configuration

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


class LoggingMixin:
    """
    Mixin class to add logging capabilities to any class
    """

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class"""
        if not hasattr(self, '_logger'):
            self._logger = get_logger(f"{self.__module__}.{self.__class__.__name__}")
        return self._logger
