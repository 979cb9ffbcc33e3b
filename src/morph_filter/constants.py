"""
Constants for the morphology filter
Centralized defaults shared by the filter, the oracles and the configuration
"""

from typing import Any, Dict, List

# Bit within the token flags that asks the morphology filter to leave a token alone
DEFAULT_PRESERVE_MORPHOLOGY_FLAG = 1 << 27

# Supported languages (pymorphy3 dictionaries)
SUPPORTED_LANGUAGES: List[str] = ["ru", "uk"]
DEFAULT_LANGUAGE = "ru"

# Oracle caching
DEFAULT_MORPH_CACHE_SIZE = 50_000

# Token defaults
DEFAULT_POSITION_INCREMENT = 1
DEFAULT_TOKEN_TYPE = "word"

# Runs of word characters, optionally joined by inner hyphens or apostrophes
WORD_PATTERN = r"\w+(?:[-'’]\w+)*"

# Logging defaults
LOGGING_CONFIG: Dict[str, Any] = {
    "default_level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "date_format": "%Y-%m-%d %H:%M:%S",
    "quiet_loggers": ["pymorphy3"],
}
