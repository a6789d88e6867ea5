"""String helpers for the shell: searching, slicing, splitting and conversion.

Positions are returned as indexes rather than pointers. A search that
finds nothing returns ``None``.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, Optional, Tuple

_NUL = "\0"
_ATOI_SPACE = " \t\n\v\f\r"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def strchr(text: str, c: str) -> Optional[int]:
    """Return the index of the first *c* in *text*.

    Searching for ``"\\0"`` finds the end of the string, ``len(text)``.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Return the index of the last *c* in *text*.

    Searching for ``"\\0"`` finds the end of the string, ``len(text)``.
    """
    _single_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strncmp(left: str, right: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the difference of the first differing character codes, or 0.
    The end of a string compares as code 0 and ends the comparison.
    """
    _non_negative(n, "count")
    pairs = zip_longest(left, right, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            return 0
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find *needle* lying entirely within the first *length* characters.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* starting at *start*.

    A start at or past the end yields an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]


def strjoin(left: str, right: str) -> str:
    """Return the concatenation of *left* and *right*."""
    return left + right


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    return text.strip(charset)


def split(text: str, sep: str) -> List[str]:
    """Split *text* on *sep*, dropping empty pieces."""
    _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks are skipped, one optional sign is read, then digits up
    to the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_ATOI_SPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return sign * number


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character.

    A string returned by *func* replaces that character; ``None`` keeps it.
    The resulting string is returned.
    """
    pieces = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        pieces.append(ch if replacement is None else replacement)
    return "".join(pieces)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text and the full length of *src*; a size of 0
    copies nothing.
    """
    _non_negative(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* slots.

    Returns the resulting text and the length it tried to create. When
    *size* does not exceed ``len(dst)`` nothing is appended and the length
    reported is ``size + len(src)``.
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)