"""
morph_filter - streaming morphology filter for token pipelines.

Expands each token into its normal forms using a morphological oracle
(pymorphy3 by default) while keeping expansions at the original position.
"""

from .constants import DEFAULT_PRESERVE_MORPHOLOGY_FLAG
from .layers.analysis import (
    CapturedState,
    ListTokenStream,
    LowerCaseFilter,
    PreserveFlagFilter,
    RegexTokenizer,
    Token,
    TokenAttributes,
    TokenFilter,
    TokenStream,
)
from .layers.analyzer import MorphologyAnalyzer, group_by_position
from .layers.morphology import (
    DictionaryOracle,
    MorphologyFilter,
    MorphologyOracle,
    PymorphyOracle,
)

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "DEFAULT_PRESERVE_MORPHOLOGY_FLAG",
    "CapturedState",
    "Token",
    "TokenAttributes",
    "TokenStream",
    "TokenFilter",
    "ListTokenStream",
    "RegexTokenizer",
    "LowerCaseFilter",
    "PreserveFlagFilter",
    "MorphologyFilter",
    "MorphologyOracle",
    "PymorphyOracle",
    "DictionaryOracle",
    "MorphologyAnalyzer",
    "group_by_position",
]
