"""
Morphology filter: replace each token with its normal forms.

One upstream token may become zero, one or several output tokens. When the
oracle returns several normal forms, the first one is emitted straight away
and the rest are buffered together with a snapshot of the token's attributes;
the following calls drain the buffer at position increment 0 before anything
new is pulled from upstream.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from ...constants import DEFAULT_PRESERVE_MORPHOLOGY_FLAG
from ...exceptions import ConfigurationError
from ...utils.logging_config import get_logger
from ..analysis.attributes import CapturedState
from ..analysis.token_stream import TokenFilter, TokenStream
from .oracle import MorphologyOracle


class MorphologyFilter(TokenFilter):
    """Expand tokens into the normal forms reported by a morphological oracle."""

    def __init__(
        self,
        input: TokenStream,
        oracle: MorphologyOracle,
        use_preserve_flag: bool = False,
        preserve_morphology_flag: int = DEFAULT_PRESERVE_MORPHOLOGY_FLAG,
    ):
        """
        Initialize the filter

        Args:
            input: Upstream token stream
            oracle: Word recognition and normal form provider
            use_preserve_flag: Pass tokens carrying ``preserve_morphology_flag`` through untouched
            preserve_morphology_flag: Bitmask tested against the token flags
        """
        super().__init__(input)
        if oracle is None:
            raise ConfigurationError("MorphologyFilter requires an oracle")
        if preserve_morphology_flag <= 0:
            raise ConfigurationError(
                "preserve_morphology_flag must be a positive bitmask",
                details={"preserve_morphology_flag": preserve_morphology_flag},
            )
        self.logger = get_logger(__name__)
        self.oracle = oracle
        self.use_preserve_flag = use_preserve_flag
        self.preserve_morphology_flag = preserve_morphology_flag

        self._pending: Optional[Deque[str]] = None
        self._state: Optional[CapturedState] = None

    @classmethod
    def from_config(cls, input: TokenStream, oracle: MorphologyOracle, config) -> "MorphologyFilter":
        """Build a filter from a ``MorphologyFilterConfig``."""
        return cls(
            input,
            oracle,
            use_preserve_flag=config.use_preserve_flag,
            preserve_morphology_flag=config.preserve_morphology_flag,
        )

    @property
    def has_pending(self) -> bool:
        """True while buffered normal forms are waiting to be emitted."""
        return self._pending is not None

    def increment_token(self) -> bool:
        attrs = self.attributes

        if self._pending is not None:
            attrs.restore_state(self._state)
            attrs.position_increment = 0
            attrs.text = self._pending.popleft()
            if not self._pending:
                self._pending = None
                self._state = None
            return True

        while True:
            if not self.input.increment_token():
                return False

            if self.use_preserve_flag and attrs.flags & self.preserve_morphology_flag:
                return True

            word = attrs.text
            if not word:
                continue

            restore_case = word[0].isupper() and not word.isupper()
            if restore_case:
                word = word.lower()

            if not self.oracle.is_known(word):
                return True

            forms: List[str] = list(self.oracle.normal_forms(word))
            if restore_case and forms:
                forms.extend([_upper_first(form) for form in forms])

            if not forms:
                self.logger.debug("Dropping '%s': no normal forms", attrs.text)
                continue

            attrs.text = forms[0]
            if len(forms) > 1:
                # Only one expansion may be buffered at a time
                assert self._pending is None
                self._state = attrs.capture_state()
                self._pending = deque(forms[1:])
                self.logger.debug("Expanded '%s' into %d forms", word, len(forms))
            return True

    def reset(self) -> None:
        super().reset()
        self._pending = None
        self._state = None


def _upper_first(form: str) -> str:
    return form[:1].upper() + form[1:]
