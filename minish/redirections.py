"""Opening the files and heredocs a command's redirections name."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from typing import BinaryIO, Callable, Optional

from minish.models import Command, RedirType

ReadLine = Callable[[str], Optional[str]]

_FILE_MODE = 0o644


class RedirectionError(Exception):
    """Raised when a redirection target cannot be opened."""

    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f"minishell: {reason}")
        self.filename = filename
        self.reason = reason


@dataclass
class Streams:
    """Replacement standard input and output for a command; ``None`` keeps the inherited one."""

    stdin: Optional[BinaryIO] = None
    stdout: Optional[BinaryIO] = None

    def close(self) -> None:
        """Close both streams; calling it again does nothing."""
        for stream in (self.stdin, self.stdout):
            if stream is not None:
                stream.close()
        self.stdin = None
        self.stdout = None

    def __enter__(self) -> "Streams":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _prompt_line(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def read_heredoc(delimiter: str, read_line: Optional[ReadLine] = None) -> str:
    """Read lines prompted with ``> `` until *delimiter* or end of input.

    Returns the lines read, each followed by a newline.
    """
    reader = _prompt_line if read_line is None else read_line
    lines = []
    while True:
        line = reader("> ")
        if line is None or line == delimiter:
            break
        lines.append(line + "\n")
    return "".join(lines)


def _open_write(path: str, extra_flags: int, mode: str) -> BinaryIO:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | extra_flags, _FILE_MODE)
    return os.fdopen(fd, mode)


def _heredoc_stream(delimiter: str, read_line: Optional[ReadLine]) -> BinaryIO:
    body = read_heredoc(delimiter, read_line)
    stream = tempfile.TemporaryFile()
    stream.write(body.encode())
    stream.seek(0)
    return stream


def _replace(current: Optional[BinaryIO], new: BinaryIO) -> BinaryIO:
    if current is not None:
        current.close()
    return new


def open_redirections(command: Command, read_line: Optional[ReadLine] = None) -> Streams:
    """Open every redirection of *command* in order.

    Later redirections of the same direction replace earlier ones, but the
    earlier files are still created. Raises RedirectionError on the first
    target that cannot be opened.
    """
    streams = Streams()
    for redir in command.redirections:
        try:
            if redir.type is RedirType.OUT:
                streams.stdout = _replace(streams.stdout, _open_write(redir.file, os.O_TRUNC, "wb"))
            elif redir.type is RedirType.APPEND:
                streams.stdout = _replace(streams.stdout, _open_write(redir.file, os.O_APPEND, "ab"))
            elif redir.type is RedirType.IN:
                streams.stdin = _replace(streams.stdin, open(redir.file, "rb"))
            else:
                streams.stdin = _replace(streams.stdin, _heredoc_stream(redir.file, read_line))
        except OSError as exc:
            streams.close()
            raise RedirectionError(redir.file, exc.strerror or str(exc)) from exc
    return streams