import pytest

from minish.env import Environment
from minish.models import Command, Redirection, RedirType
from minish.text import format_command_list, format_env, remove_quotes


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("plain", "plain"),
        ('"a b"', "a b"),
        ("'a b'", "a b"),
        ("'a\"b'", 'a"b'),
        ('"it\'s"', "it's"),
        ("''", ""),
        ('x"y"z', "xyz"),
    ],
)
def test_remove_quotes(raw, expected):
    assert remove_quotes(raw) == expected


def test_remove_quotes_is_idempotent_on_unquoted_text():
    text = remove_quotes("'$HOME' and \"$USER\"")
    assert remove_quotes(text) == text


def test_format_command_list_without_redirections():
    out = format_command_list([Command(args=["ls", "-l"])])
    assert out == (
        "\n--- PARSER CIKTISI ---\n"
        "\n\u2705 KOMUT 1\n"
        "   -> Args: ['ls', '-l']\n"
        "   -> Redir: Yok\n"
        "----------------------\n"
    )


def test_format_command_list_with_redirections():
    command = Command(
        args=["cat"],
        redirections=[
            Redirection(RedirType.HEREDOC, "EOF"),
            Redirection(RedirType.APPEND, "log"),
        ],
    )
    out = format_command_list([command, Command(args=["wc"])])
    assert "   -> Redir:  <<:'EOF' >>:'log'\n" in out
    assert "KOMUT 2" in out
    assert out.count("Yok") == 1


def test_format_command_list_empty():
    assert format_command_list([]) == "\n--- PARSER CIKTISI ---\n----------------------\n"


def test_format_env():
    env = Environment.from_strings(["USER=alice"])
    env.set("FLAG", None)
    assert format_env(env) == "Key: USER | Value: alice\nKey: FLAG | Value: (null)\n"