"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code
point. Classification functions return ``bool``; conversion functions
return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_UPPER_START = ord("A")
_UPPER_END = ord("Z")
_LOWER_START = ord("a")
_LOWER_END = ord("z")
_DIGIT_START = ord("0")
_DIGIT_END = ord("9")
_CASE_OFFSET = _LOWER_START - _UPPER_START


def _code(c: Char) -> int:
    """Return the integer code of *c*, validating its form."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer, got {type(c).__name__}")


def _is_upper(code: int) -> bool:
    return _UPPER_START <= code <= _UPPER_END


def _is_lower(code: int) -> bool:
    return _LOWER_START <= code <= _LOWER_END


def is_alpha(c: Char) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_digit(c: Char) -> bool:
    """Return True for an ASCII decimal digit."""
    code = _code(c)
    return _DIGIT_START <= code <= _DIGIT_END


def is_alnum(c: Char) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def to_upper(c: Char) -> Char:
    """Convert an ASCII lowercase letter to uppercase; leave anything else."""
    code = _code(c)
    if _is_lower(code):
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: Char) -> Char:
    """Convert an ASCII uppercase letter to lowercase; leave anything else."""
    code = _code(c)
    if _is_upper(code):
        code += _CASE_OFFSET
    return _same_kind(c, code)