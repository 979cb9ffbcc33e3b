"""
Pull-based token streams.

Consumers call ``increment_token()`` until it returns ``False`` and read the
current token from the shared ``attributes`` after every ``True``. A stream is
used as ``reset()`` -> ``increment_token()``* -> ``end()`` -> ``close()``;
iterating a stream runs that cycle (without the close) and yields ``Token``
snapshots.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Union

from ...exceptions import TokenStreamError
from .attributes import CapturedState, Token, TokenAttributes


class TokenStream(ABC):
    """Base class for token producers."""

    def __init__(self, attributes: Optional[TokenAttributes] = None):
        self.attributes = attributes if attributes is not None else TokenAttributes()
        self._closed = False

    @abstractmethod
    def increment_token(self) -> bool:
        """
        Advance to the next token.

        Returns:
            True when a token was produced into ``attributes``, False at end of stream
        """

    def reset(self) -> None:
        """Prepare the stream for consumption."""
        self._check_open()

    def end(self) -> None:
        """Called once after the last token; may set end-of-stream attributes."""

    def close(self) -> None:
        """Release resources; the stream cannot be consumed afterwards."""
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def capture_state(self) -> CapturedState:
        return self.attributes.capture_state()

    def restore_state(self, state: CapturedState) -> None:
        self.attributes.restore_state(state)

    def _check_open(self) -> None:
        if self._closed:
            raise TokenStreamError(
                f"{self.__class__.__name__} is closed",
                details={"stream": self.__class__.__name__},
            )

    def __iter__(self) -> Iterator[Token]:
        self.reset()
        while self.increment_token():
            yield self.attributes.to_token()
        self.end()


class TokenFilter(TokenStream):
    """A token stream that rewrites the tokens of another stream in place."""

    def __init__(self, input: TokenStream):
        super().__init__(input.attributes)
        self.input = input

    def reset(self) -> None:
        super().reset()
        self.input.reset()

    def end(self) -> None:
        self.input.end()

    def close(self) -> None:
        self.input.close()
        super().close()


class ListTokenStream(TokenStream):
    """Token stream over pre-tokenized input.

    Items may be ``Token`` objects or plain strings; strings become tokens with
    a position increment of 1 and no flags.
    """

    def __init__(self, tokens: Iterable[Union[Token, str]], attributes: Optional[TokenAttributes] = None):
        super().__init__(attributes)
        self._tokens: List[Token] = [
            item if isinstance(item, Token) else Token(text=item) for item in tokens
        ]
        self._index = 0

    def reset(self) -> None:
        super().reset()
        self._index = 0

    def increment_token(self) -> bool:
        self._check_open()
        if self._index >= len(self._tokens):
            return False
        self.attributes.load(self._tokens[self._index])
        self._index += 1
        return True
