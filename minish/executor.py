"""Running a parsed pipeline: builtins in-process, programs as child processes."""

from __future__ import annotations

import io
import os
import subprocess
import sys
import tempfile
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from minish.builtins import is_builtin, run_builtin
from minish.env import Environment
from minish.models import Command
from minish.redirections import ReadLine, RedirectionError, open_redirections
from minish.strutil import split

Outcome = Union[int, "subprocess.Popen[bytes]"]


def find_path(name: str, env: Environment) -> Optional[str]:
    """Locate the executable for *name*.

    A name holding ``/`` is used as it is; otherwise each directory of
    ``$PATH`` is tried in order. Returns None when nothing executable is found.
    """
    if "/" in name:
        return name if os.access(name, os.X_OK) else None
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split(search, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def _process_env(env: Environment) -> Dict[str, str]:
    return {key: value for key, value in env if value is not None}


def _copy_env(env: Environment) -> Environment:
    copy = Environment()
    for key, value in env:
        copy.set(key, value)
    return copy


def _empty_input(last: bool) -> Any:
    return None if last else subprocess.DEVNULL


def _close(stream: Any) -> None:
    if stream is not None and hasattr(stream, "close"):
        stream.close()


def _run_builtin_stage(command: Command, env: Environment, stdout: Any, last: bool) -> Tuple[int, Any]:
    buffer = io.StringIO()
    cwd = os.getcwd()
    try:
        run_builtin(command, _copy_env(env), buffer, sys.stderr)
    except SystemExit:
        pass
    finally:
        os.chdir(cwd)
    text = buffer.getvalue()
    if stdout is not None:
        stdout.write(text.encode())
        return 0, _empty_input(last)
    if last:
        sys.stdout.write(text)
        sys.stdout.flush()
        return 0, None
    piped = tempfile.TemporaryFile()
    piped.write(text.encode())
    piped.seek(0)
    return 0, piped


def _run_stage(
    command: Command,
    env: Environment,
    read_line: Optional[ReadLine],
    stdin_source: Any,
    last: bool,
) -> Tuple[Outcome, Any]:
    try:
        streams = open_redirections(command, read_line)
    except RedirectionError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1, _empty_input(last)
    with streams:
        if not command.args:
            return 0, _empty_input(last)
        name = command.args[0]
        if is_builtin(name):
            return _run_builtin_stage(command, env, streams.stdout, last)
        path = find_path(name, env)
        if path is None:
            sys.stderr.write("Command not found\n")
            return 127, _empty_input(last)
        stdin = streams.stdin if streams.stdin is not None else stdin_source
        if streams.stdout is not None:
            stdout: Any = streams.stdout
        elif not last:
            stdout = subprocess.PIPE
        else:
            stdout = None
        sys.stdout.flush()
        try:
            process = subprocess.Popen(
                command.args,
                executable=path,
                stdin=stdin,
                stdout=stdout,
                env=_process_env(env),
            )
        except OSError as exc:
            sys.stderr.write(f"execve: {exc.strerror or exc}\n")
            return 1, _empty_input(last)
        if stdout is subprocess.PIPE:
            return process, process.stdout
        return process, _empty_input(last)


def _status(outcome: Outcome) -> int:
    if isinstance(outcome, int):
        return outcome
    code = outcome.wait()
    return 128 - code if code < 0 else code


def execute(
    commands: Iterable[Command],
    env: Environment,
    read_line: Optional[ReadLine] = None,
) -> int:
    """Run a pipeline and return the exit status of its last command.

    When the first command is a builtin it runs alone in the shell itself
    and the rest of the line is not run. Otherwise every command runs as
    its own stage, connected by pipes, and all stages are waited for.
    """
    pipeline = list(commands)
    if not pipeline:
        return 0
    first = pipeline[0]
    if first.args and is_builtin(first.args[0]):
        return run_builtin(first, env, sys.stdout, sys.stderr)
    outcomes: List[Outcome] = []
    previous: Any = None
    for position, command in enumerate(pipeline):
        last = position == len(pipeline) - 1
        stdin_source, previous = previous, None
        try:
            outcome, previous = _run_stage(command, env, read_line, stdin_source, last)
        finally:
            _close(stdin_source)
        outcomes.append(outcome)
    _close(previous)
    statuses = [_status(outcome) for outcome in outcomes]
    return statuses[-1]