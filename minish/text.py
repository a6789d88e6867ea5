"""Text helpers: quote removal and debug listings of commands and variables."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from minish.models import Command

_NULL_TEXT = "(null)"


def remove_quotes(text: str) -> str:
    """Remove quoting characters, keeping quotes that are themselves quoted."""
    in_single = False
    in_double = False
    kept = []
    for ch in text:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        else:
            kept.append(ch)
    return "".join(kept)


def format_command_list(commands: Iterable[Command]) -> str:
    """Return a readable listing of parsed commands."""
    lines = ["", "--- PARSER CIKTISI ---"]
    for number, command in enumerate(commands, start=1):
        lines.append("")
        lines.append(f"\u2705 KOMUT {number}")
        args = ", ".join(f"'{arg}'" for arg in command.args)
        lines.append(f"   -> Args: [{args}]")
        if command.redirections:
            redirs = "".join(
                f" {redir.type.symbol()}:'{redir.file}'" for redir in command.redirections
            )
            lines.append(f"   -> Redir: {redirs}")
        else:
            lines.append("   -> Redir: Yok")
    lines.append("----------------------")
    return "\n".join(lines) + "\n"


def format_env(env: Iterable[Tuple[str, Optional[str]]]) -> str:
    """Return one ``Key: ... | Value: ...`` line per variable."""
    return "".join(
        f"Key: {key} | Value: {_NULL_TEXT if value is None else value}\n"
        for key, value in env
    )