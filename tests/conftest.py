"""
Pytest configuration for morphology filter tests
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src to path for module imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from morph_filter.layers.morphology.oracle import DictionaryOracle  # noqa: E402


SAMPLE_LEXICON = {
    "foo": ["foo", "fooz"],
    "cats": ["cat"],
    "run": ["run"],
    "baz": [],
    "leaves": ["leaf", "leave", "leaves"],
    "FOO": ["foo", "fooz"],
    "стали": ["стать", "сталь"],
}


@pytest.fixture
def lexicon():
    """Provide a copy of the sample lexicon"""
    return {word: list(forms) for word, forms in SAMPLE_LEXICON.items()}


@pytest.fixture
def oracle(lexicon):
    """Dictionary oracle wrapped in a Mock so calls can be asserted"""
    return Mock(wraps=DictionaryOracle(lexicon))
