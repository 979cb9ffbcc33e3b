"""Companion filters placed in front of the morphology filter."""

from typing import FrozenSet, Iterable

from ...constants import DEFAULT_PRESERVE_MORPHOLOGY_FLAG
from .token_stream import TokenFilter, TokenStream


class LowerCaseFilter(TokenFilter):
    """Lowercase the text of every token."""

    def increment_token(self) -> bool:
        if not self.input.increment_token():
            return False
        self.attributes.text = self.attributes.text.lower()
        return True


class PreserveFlagFilter(TokenFilter):
    """
    Mark tokens that must keep their surface form.

    Tokens whose text is one of ``words`` get ``flag`` OR-ed into their flags,
    which a morphology filter with ``use_preserve_flag`` enabled passes through
    without consulting the oracle.
    """

    def __init__(
        self,
        input: TokenStream,
        words: Iterable[str],
        flag: int = DEFAULT_PRESERVE_MORPHOLOGY_FLAG,
        ignore_case: bool = True,
    ):
        super().__init__(input)
        self.flag = flag
        self.ignore_case = ignore_case
        self.words: FrozenSet[str] = frozenset(
            word.lower() if ignore_case else word for word in words
        )

    def increment_token(self) -> bool:
        if not self.input.increment_token():
            return False
        text = self.attributes.text
        if (text.lower() if self.ignore_case else text) in self.words:
            self.attributes.flags |= self.flag
        return True
