"""Split a command line into words and operator tokens."""

from __future__ import annotations

from typing import Iterator, List

from minish.models import Token, TokenType

_BLANKS = " \t\n\v\f\r"
_OPERATOR_CHARS = "|<>"
_QUOTES = "'\""

_DOUBLE_OPERATORS = {"<<": TokenType.HEREDOC, ">>": TokenType.APPEND}
_SINGLE_OPERATORS = {
    "<": TokenType.REDIRECT_IN,
    ">": TokenType.REDIRECT_OUT,
    "|": TokenType.PIPE,
}


def tokenize(text: str) -> List[Token]:
    """Return the tokens of *text*.

    Words keep their quote characters; a quoted section may hold blanks
    and operator characters. An unclosed quote runs to the end of input.
    """
    return list(_scan(text))


def _scan(text: str) -> Iterator[Token]:
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in _BLANKS:
            pos += 1
        elif ch in _OPERATOR_CHARS:
            pair = text[pos:pos + 2]
            if pair in _DOUBLE_OPERATORS:
                yield Token(pair, _DOUBLE_OPERATORS[pair])
                pos += 2
            else:
                yield Token(ch, _SINGLE_OPERATORS[ch])
                pos += 1
        else:
            end = _word_end(text, pos)
            yield Token(text[pos:end], TokenType.WORD)
            pos = end


def _word_end(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] not in _BLANKS and text[pos] not in _OPERATOR_CHARS:
        if text[pos] in _QUOTES:
            closing = text.find(text[pos], pos + 1)
            pos = len(text) if closing < 0 else closing + 1
        else:
            pos += 1
    return pos