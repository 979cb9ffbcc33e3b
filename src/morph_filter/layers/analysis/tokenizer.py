"""Regex word tokenizer, the usual head of an analysis chain."""

import re
from typing import Iterator, Optional, Pattern, Union

from ...constants import DEFAULT_POSITION_INCREMENT, DEFAULT_TOKEN_TYPE, WORD_PATTERN
from ...exceptions import ConfigurationError, TokenStreamError
from .attributes import TokenAttributes
from .token_stream import TokenStream


class RegexTokenizer(TokenStream):
    """Emit every match of ``pattern`` in the input text as a token."""

    def __init__(
        self,
        text: str = "",
        pattern: Union[str, Pattern[str]] = WORD_PATTERN,
        attributes: Optional[TokenAttributes] = None,
    ):
        super().__init__(attributes)
        if isinstance(pattern, str):
            try:
                pattern = re.compile(pattern)
            except re.error as exc:
                raise ConfigurationError(
                    f"Invalid tokenizer pattern: {exc}",
                    details={"pattern": pattern},
                ) from exc
        self.pattern = pattern
        self._text = text
        self._matches: Optional[Iterator[re.Match]] = None

    def set_text(self, text: str) -> None:
        """Replace the input text; ``reset()`` must be called before consuming it."""
        self._text = text
        self._matches = None

    def reset(self) -> None:
        super().reset()
        self._matches = self.pattern.finditer(self._text)

    def increment_token(self) -> bool:
        self._check_open()
        if self._matches is None:
            raise TokenStreamError("RegexTokenizer consumed without reset()")
        match = next(self._matches, None)
        if match is None:
            return False
        attrs = self.attributes
        attrs.clear()
        attrs.text = match.group(0)
        attrs.position_increment = DEFAULT_POSITION_INCREMENT
        attrs.start_offset = match.start()
        attrs.end_offset = match.end()
        attrs.type = DEFAULT_TOKEN_TYPE
        return True

    def end(self) -> None:
        # Final offset points past the last character
        self.attributes.start_offset = len(self._text)
        self.attributes.end_offset = len(self._text)

    def close(self) -> None:
        self._matches = None
        super().close()
