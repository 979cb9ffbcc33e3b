"""
Fixtures shared by the unit tests
"""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides from leaking into configuration defaults"""
    for name in (
        "MORPH_FILTER_USE_PRESERVE_FLAG",
        "MORPH_FILTER_PRESERVE_FLAG",
        "MORPH_FILTER_LANGUAGE",
        "MORPH_FILTER_CACHE_SIZE",
        "APP_ENV",
        "LOGGING_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)
