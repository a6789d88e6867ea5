# minish

`minish` holds the building blocks of a small POSIX-style shell as plain Python
modules. Each module can be used and tested on its own.

## Modules

- **`minish.lexer`**: `tokenize(text)` splits a command line into a list of
  `Token`s. The tokens are words and the operators `|`, `<`, `>`, `>>` and `<<`.
  A word keeps its quote characters. A quoted section stays inside its word, so
  `echo "a | b"` gives two words and no pipe. An unclosed quote runs to the end
  of the input.
- **`minish.models`**: the shared data types. They are `TokenType`, `Token`,
  `RedirType` (with `from_token_type` and `symbol()`), `Redirection` and
  `Command`. A `Command` has `args` and `redirections` lists.
- **`minish.text`**: `remove_quotes(text)` removes single and double quotes.
  A quote of the other kind stays literal when it appears inside quotes.
  `format_command_list(commands)` and `format_env(env)` produce debug listings.
- **`minish.parser`**: `add_redirect(tokens, index, command)` attaches the
  redirection whose operator is at `tokens[index]` to a `Command`. If no word
  follows the operator, it raises `ShellSyntaxError`.
- **`minish.env`**: `Environment` holds variables in the order they were
  inserted. It is built from `KEY=value` strings with
  `Environment.from_strings`. It offers `get`, `set` and `unset`.
  `to_strings()` returns `KEY=value` for each variable that has a value. It
  supports `in`, `len()` and iteration over `(key, value)` pairs. A variable
  declared without a value holds `None`. Setting `None` never overwrites an
  existing value.
- **`minish.builtins`**: the builtins `echo` (with `-n`, `-nnn`, …), `pwd`,
  `print_env` (the `env` command), `export`, `unset`, `cd` and `exit_shell`.
  `exit_shell` prints `exit` and raises `SystemExit(0)`. `is_builtin(name)`
  checks a name. `run_builtin(command, env, stdout, stderr)` runs a builtin and
  returns its status.
- **`minish.redirections`**: `open_redirections(command, read_line)` opens the
  `<`, `>`, `>>` and here-document redirections of a command in order. It
  returns a `Streams` object, which is also a context manager. It raises
  `RedirectionError` when a file cannot be opened. `read_heredoc(delimiter,
  read_line)` collects lines until the delimiter or end of input.
- **`minish.executor`**: `find_path(name, env)` looks up an executable on the
  environment's `PATH`. `execute(commands, env, read_line)` runs a pipeline and
  returns the status of its last command. Programs run as child processes
  connected by pipes. When the first command is a builtin, it runs alone in
  the current process and the rest of the line is not run.
- **`minish.strutil`**, **`minish.charclass`**, **`minish.memory`** and
  **`minish.output`**: string, character-class, byte-buffer and stream-writing
  helpers.

## Example

```python
from minish.env import Environment
from minish.lexer import tokenize
from minish.text import remove_quotes

env = Environment.from_strings(["HOME=/home/user", "PATH=/usr/bin:/bin"])
env.set("GREETING", "hello")
print(env.get("GREETING"))        # hello
print("PATH" in env)              # True

for token in tokenize('echo "a | b" > out.txt'):
    print(token)

print(remove_quotes("'it''s'"))   # its
```

## What it does not do

The package has no interactive prompt loop and no command to start a shell. It
does not expand `$VARIABLE` references. It has no function that turns a full
token list into a list of `Command`s split at pipes. Build `Command` objects
yourself, using `add_redirect` for the redirections, and pass them to
`execute`.

## Tests

The tests use pytest. It is available through the `test` extra.