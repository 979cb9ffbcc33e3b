"""
Token model, token streams and the companion filters of an analysis chain.
"""

from .attributes import CapturedState, Token, TokenAttributes
from .filters import LowerCaseFilter, PreserveFlagFilter
from .token_stream import ListTokenStream, TokenFilter, TokenStream
from .tokenizer import RegexTokenizer

__all__ = [
    "CapturedState",
    "Token",
    "TokenAttributes",
    "TokenStream",
    "TokenFilter",
    "ListTokenStream",
    "RegexTokenizer",
    "LowerCaseFilter",
    "PreserveFlagFilter",
]
