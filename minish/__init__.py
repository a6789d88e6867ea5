"""Building blocks of a small shell: lexer, environment, builtins, redirections and pipelines."""

__version__ = "0.1.0"