"""
Token attributes shared by every stage of an analysis chain.

A chain of token streams shares one mutable ``TokenAttributes`` object: the
tokenizer writes into it and every filter rewrites it in place. Filters that
emit several tokens for one input token snapshot everything except the text
with ``capture_state`` and replay it with ``restore_state``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

from ...constants import DEFAULT_POSITION_INCREMENT, DEFAULT_TOKEN_TYPE
from ...exceptions import ValidationError


@dataclass(frozen=True)
class Token:
    """Immutable copy of a token as seen by a consumer."""

    text: str
    position_increment: int = DEFAULT_POSITION_INCREMENT
    flags: int = 0
    start_offset: int = 0
    end_offset: int = 0
    type: str = DEFAULT_TOKEN_TYPE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class CapturedState:
    """Snapshot of all token attributes except the text."""

    position_increment: int
    flags: int
    start_offset: int
    end_offset: int
    type: str


@dataclass
class TokenAttributes:
    """Mutable token context written by tokenizers and rewritten by filters."""

    text: str = ""
    position_increment: int = DEFAULT_POSITION_INCREMENT
    flags: int = 0
    start_offset: int = 0
    end_offset: int = 0
    type: str = DEFAULT_TOKEN_TYPE

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "position_increment" and value < 0:
            raise ValidationError(
                f"Position increment must be zero or greater, got {value}",
                details={"position_increment": value},
            )
        super().__setattr__(name, value)

    def clear(self) -> None:
        """Reset every attribute to its default before a new token is produced."""
        self.text = ""
        self.position_increment = DEFAULT_POSITION_INCREMENT
        self.flags = 0
        self.start_offset = 0
        self.end_offset = 0
        self.type = DEFAULT_TOKEN_TYPE

    def capture_state(self) -> CapturedState:
        return CapturedState(
            position_increment=self.position_increment,
            flags=self.flags,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            type=self.type,
        )

    def restore_state(self, state: CapturedState) -> None:
        """Overlay a captured snapshot; the current text is left untouched."""
        self.position_increment = state.position_increment
        self.flags = state.flags
        self.start_offset = state.start_offset
        self.end_offset = state.end_offset
        self.type = state.type

    def load(self, token: Token) -> None:
        """Copy every attribute of ``token`` into this context."""
        self.text = token.text
        self.position_increment = token.position_increment
        self.flags = token.flags
        self.start_offset = token.start_offset
        self.end_offset = token.end_offset
        self.type = token.type

    def to_token(self) -> Token:
        return Token(
            text=self.text,
            position_increment=self.position_increment,
            flags=self.flags,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
            type=self.type,
        )
