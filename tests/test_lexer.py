from minish.lexer import tokenize
from minish.models import TokenType


def values(text):
    return [token.value for token in tokenize(text)]


def types(text):
    return [token.type for token in tokenize(text)]


def test_empty_and_blank_input():
    assert tokenize("") == []
    assert tokenize("   \t  ") == []


def test_simple_pipeline():
    assert values("ls -l | wc") == ["ls", "-l", "|", "wc"]
    assert types("ls -l | wc") == [
        TokenType.WORD,
        TokenType.WORD,
        TokenType.PIPE,
        TokenType.WORD,
    ]


def test_operators_without_spaces():
    assert values("cat<<EOF>>out") == ["cat", "<<", "EOF", ">>", "out"]
    assert types("cat<<EOF>>out") == [
        TokenType.WORD,
        TokenType.HEREDOC,
        TokenType.WORD,
        TokenType.APPEND,
        TokenType.WORD,
    ]


def test_single_redirections():
    assert types("< in > out") == [
        TokenType.REDIRECT_IN,
        TokenType.WORD,
        TokenType.REDIRECT_OUT,
        TokenType.WORD,
    ]


def test_triple_angle_splits_into_double_and_single():
    assert values("<<<") == ["<<", "<"]
    assert types("<<<") == [TokenType.HEREDOC, TokenType.REDIRECT_IN]


def test_quotes_keep_blanks_and_operators():
    assert values('echo "a | b" \'c > d\'') == ["echo", '"a | b"', "'c > d'"]


def test_quotes_are_part_of_adjoining_word():
    assert values('x"y z"w next') == ['x"y z"w', "next"]


def test_unclosed_quote_runs_to_end():
    assert values('echo "abc | def') == ["echo", '"abc | def']


def test_other_whitespace_separates_words():
    assert values("a\nb") == ["a", "b"]


def test_token_values_reassemble_input_without_blanks():
    line = "grep -v foo<in|sort>>out"
    assert "".join(values(line)) == line.replace(" ", "")