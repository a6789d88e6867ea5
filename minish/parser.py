"""Parsing helpers that attach redirections to commands."""

from __future__ import annotations

from typing import Sequence

from minish.models import Command, RedirType, Redirection, Token, TokenType


class ShellSyntaxError(Exception):
    """Raised when the command line is not well formed."""

    def __init__(self, token: str) -> None:
        super().__init__(f"syntax error near unexpected token '{token}'")
        self.token = token


def add_redirect(tokens: Sequence[Token], index: int, command: Command) -> Redirection:
    """Attach the redirection whose operator is ``tokens[index]`` to *command*.

    The following token must be a word; it names the file or delimiter.
    Returns the new redirection.
    """
    operator = tokens[index]
    if index + 1 >= len(tokens):
        raise ShellSyntaxError("newline")
    target = tokens[index + 1]
    if target.type is not TokenType.WORD:
        raise ShellSyntaxError(target.value)
    redirection = Redirection(RedirType.from_token_type(operator.type), target.value)
    command.redirections.append(redirection)
    return redirection