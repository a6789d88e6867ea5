"""Data types shared by the lexer, parser and executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List


class TokenType(Enum):
    """Kinds of token produced by the lexer."""

    WORD = auto()
    PIPE = auto()
    REDIRECT_IN = auto()
    REDIRECT_OUT = auto()
    APPEND = auto()
    HEREDOC = auto()


@dataclass
class Token:
    """A piece of command-line input: its text and its kind."""

    value: str
    type: TokenType


class RedirType(Enum):
    """Kinds of input/output redirection attached to a command."""

    IN = auto()
    OUT = auto()
    APPEND = auto()
    HEREDOC = auto()

    @classmethod
    def from_token_type(cls, token_type: TokenType) -> "RedirType":
        """Return the redirection kind an operator token stands for."""
        try:
            return _FROM_TOKEN[token_type]
        except KeyError:
            raise ValueError(f"{token_type.name} is not a redirection operator") from None

    def symbol(self) -> str:
        """Return the operator as written on the command line."""
        return _SYMBOLS[self]


_FROM_TOKEN = {
    TokenType.REDIRECT_IN: RedirType.IN,
    TokenType.REDIRECT_OUT: RedirType.OUT,
    TokenType.APPEND: RedirType.APPEND,
    TokenType.HEREDOC: RedirType.HEREDOC,
}

_SYMBOLS = {
    RedirType.IN: "<",
    RedirType.OUT: ">",
    RedirType.APPEND: ">>",
    RedirType.HEREDOC: "<<",
}


@dataclass
class Redirection:
    """One redirection: its kind and the file name or heredoc delimiter."""

    type: RedirType
    file: str


@dataclass
class Command:
    """A simple command of a pipeline: its arguments and redirections."""

    args: List[str] = field(default_factory=list)
    redirections: List[Redirection] = field(default_factory=list)