"""
Morphological oracles and the morphology filter.
"""

from .morphology_filter import MorphologyFilter
from .oracle import DictionaryOracle, MorphologyOracle, PymorphyOracle

__all__ = [
    "MorphologyFilter",
    "MorphologyOracle",
    "PymorphyOracle",
    "DictionaryOracle",
]
