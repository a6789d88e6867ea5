import pytest

from minish.models import Command, RedirType, Redirection, Token, TokenType


@pytest.mark.parametrize(
    "token_type, expected",
    [
        (TokenType.REDIRECT_IN, RedirType.IN),
        (TokenType.REDIRECT_OUT, RedirType.OUT),
        (TokenType.APPEND, RedirType.APPEND),
        (TokenType.HEREDOC, RedirType.HEREDOC),
    ],
)
def test_from_token_type_maps_operators(token_type, expected):
    assert RedirType.from_token_type(token_type) is expected


@pytest.mark.parametrize("token_type", [TokenType.WORD, TokenType.PIPE])
def test_from_token_type_rejects_non_redirections(token_type):
    with pytest.raises(ValueError):
        RedirType.from_token_type(token_type)


@pytest.mark.parametrize(
    "redir_type, symbol",
    [
        (RedirType.IN, "<"),
        (RedirType.OUT, ">"),
        (RedirType.APPEND, ">>"),
        (RedirType.HEREDOC, "<<"),
    ],
)
def test_symbol(redir_type, symbol):
    assert redir_type.symbol() == symbol


def test_symbols_are_distinct():
    symbols = [
        RedirType.IN.symbol(),
        RedirType.OUT.symbol(),
        RedirType.APPEND.symbol(),
        RedirType.HEREDOC.symbol(),
    ]
    assert len(set(symbols)) == 4
    assert sorted(symbols) == ["<", "<<", ">", ">>"]


def test_command_defaults_are_empty_and_independent():
    first = Command()
    second = Command()
    first.args.append("ls")
    first.redirections.append(Redirection(RedirType.OUT, "out.txt"))
    assert second.args == []
    assert second.redirections == []
    assert first.args == ["ls"]


def test_token_equality():
    assert Token("ls", TokenType.WORD) == Token("ls", TokenType.WORD)
    assert Token("|", TokenType.PIPE) != Token("|", TokenType.WORD)