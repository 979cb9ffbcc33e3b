"""
Analyzer that turns raw text into lemma tokens.

Chains ``RegexTokenizer`` -> [``PreserveFlagFilter``] -> [``LowerCaseFilter``]
-> ``MorphologyFilter`` and collects the result.
"""

from typing import Iterable, List, Optional

from ..config.settings import MorphologyFilterConfig, build_settings
from ..utils.logging_config import LoggingMixin
from .analysis.attributes import Token
from .analysis.filters import LowerCaseFilter, PreserveFlagFilter
from .analysis.token_stream import TokenStream
from .analysis.tokenizer import RegexTokenizer
from .morphology.morphology_filter import MorphologyFilter
from .morphology.oracle import MorphologyOracle


class MorphologyAnalyzer(LoggingMixin):
    """Build morphology analysis chains for text."""

    def __init__(
        self,
        oracle: MorphologyOracle,
        config: Optional[MorphologyFilterConfig] = None,
        lowercase: bool = False,
        protected_words: Optional[Iterable[str]] = None,
    ):
        """
        Initialize the analyzer

        Args:
            oracle: Morphological oracle shared by every chain this analyzer builds
            config: Filter settings, read from the environment when omitted
            lowercase: Lowercase tokens before the morphology filter
            protected_words: Words that keep their surface form
        """
        self.oracle = oracle
        self.config = config if config is not None else build_settings(MorphologyFilterConfig)
        self.lowercase = lowercase
        self.protected_words = frozenset(protected_words or ())
        self.logger.debug(
            "Analyzer ready: lowercase=%s, protected_words=%d, use_preserve_flag=%s",
            lowercase,
            len(self.protected_words),
            self.config.use_preserve_flag,
        )

    def token_stream(self, text: str) -> MorphologyFilter:
        """Build a fresh analysis chain over ``text``."""
        stream: TokenStream = RegexTokenizer(text)
        if self.protected_words:
            stream = PreserveFlagFilter(
                stream,
                self.protected_words,
                flag=self.config.preserve_morphology_flag,
            )
        if self.lowercase:
            stream = LowerCaseFilter(stream)
        return MorphologyFilter(
            stream,
            self.oracle,
            use_preserve_flag=self.config.use_preserve_flag or bool(self.protected_words),
            preserve_morphology_flag=self.config.preserve_morphology_flag,
        )

    def analyze(self, text: str) -> List[Token]:
        """Analyze ``text`` and return every emitted token."""
        stream = self.token_stream(text)
        try:
            return list(stream)
        finally:
            stream.close()

    def lemmas(self, text: str) -> List[str]:
        return [token.text for token in self.analyze(text)]


def group_by_position(tokens: Iterable[Token]) -> List[List[str]]:
    """
    Group token texts by position.

    A token with position increment 0 joins the group of the previous token;
    any other increment opens a new group.
    """
    groups: List[List[str]] = []
    for token in tokens:
        if token.position_increment == 0 and groups:
            groups[-1].append(token.text)
        else:
            groups.append([token.text])
    return groups
