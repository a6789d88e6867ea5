"""Commands the shell runs itself rather than by starting a program."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

from minish.env import Environment
from minish.models import Command

BUILTINS = frozenset({"pwd", "exit", "env", "export", "unset", "cd", "echo"})


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _err(stream: Optional[TextIO]) -> TextIO:
    return sys.stderr if stream is None else stream


def is_builtin(name: str) -> bool:
    """Return True if *name* is a command the shell runs itself."""
    return name in BUILTINS


def run_builtin(
    command: Command,
    env: Environment,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Run the builtin named by ``command.args[0]`` and return its status."""
    if not command.args or not is_builtin(command.args[0]):
        raise ValueError(f"not a builtin command: {command.args[:1]!r}")
    name, *args = command.args
    if name == "pwd":
        return pwd(stdout)
    if name == "exit":
        return exit_shell(stdout)
    if name == "env":
        return print_env(env, stdout)
    if name == "export":
        return export(args, env)
    if name == "unset":
        return unset(args, env)
    if name == "cd":
        return cd(args, env, stderr)
    return echo(args, stdout)


def check_flag(word: str) -> bool:
    """Return True if *word* is an ``-n`` option such as ``-n`` or ``-nnn``."""
    return len(word) > 1 and word[0] == "-" and set(word[1:]) == {"n"}


def echo(args: Sequence[str], stdout: Optional[TextIO] = None) -> int:
    """Print *args* separated by spaces; leading ``-n`` options drop the newline."""
    words = list(args)
    newline = True
    while words and check_flag(words[0]):
        newline = False
        words.pop(0)
    text = " ".join(words)
    _out(stdout).write(text + "\n" if newline else text)
    return 0


def pwd(stdout: Optional[TextIO] = None) -> int:
    """Print the current working directory."""
    out = _out(stdout)
    try:
        location = os.getcwd()
    except OSError:
        out.write("pwd error\n")
        return 1
    out.write(location + "\n")
    return 0


def print_env(env: Environment, stdout: Optional[TextIO] = None) -> int:
    """Print ``KEY=value`` for every variable that has a value."""
    out = _out(stdout)
    for entry in env.to_strings():
        out.write(entry + "\n")
    return 0


def exit_shell(stdout: Optional[TextIO] = None) -> int:
    """Print ``exit`` and leave the shell with status 0."""
    _out(stdout).write("exit\n")
    raise SystemExit(0)


def export(args: Sequence[str], env: Environment) -> int:
    """Set ``KEY=value`` arguments; a bare ``KEY`` declares it without a value."""
    for arg in args:
        key, sep, value = arg.partition("=")
        if sep:
            env.set(key, value)
        else:
            env.set(arg, None)
    return 0


def unset(args: Sequence[str], env: Environment) -> int:
    """Remove each named variable."""
    for key in args:
        env.unset(key)
    return 0


def cd(args: Sequence[str], env: Environment, stderr: Optional[TextIO] = None) -> int:
    """Change directory to the first argument, or to ``$HOME`` without one."""
    err = _err(stderr)
    if args:
        path = args[0]
    else:
        path = env.get("HOME")
        if path is None:
            err.write("minishell: cd: HOME not set\n")
            return 1
    try:
        os.chdir(path)
    except OSError:
        err.write("minishell: cd: No such file or directory\n")
        return 1
    try:
        env.set("PWD", os.getcwd())
    except OSError:
        pass
    return 0