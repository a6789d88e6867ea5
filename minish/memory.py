"""Byte-buffer helpers working on ``bytearray`` and other byte sequences."""

from __future__ import annotations

from typing import Optional, Union

Bytes = Union[bytes, bytearray, memoryview]


def _check_span(length: int, n: int, what: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > length:
        raise ValueError(f"{what} holds {length} bytes, {n} requested")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buffer* with ``value & 0xFF``."""
    _check_span(len(buffer), n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Set the first *n* bytes of *buffer* to zero."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: Bytes, n: int) -> bytearray:
    """Copy *n* bytes from *src* into the start of *dest*."""
    _check_span(len(dest), n, "destination")
    _check_span(len(src), n, "source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move *n* bytes inside *buffer* from offset *src* to offset *dest*.

    The regions may overlap.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buffer) - dest, n, "destination region")
    _check_span(len(buffer) - src, n, "source region")
    buffer[dest:dest + n] = bytes(buffer[src:src + n])
    return buffer


def memchr(data: Bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte ``value & 0xFF`` in ``data[:n]``."""
    _check_span(len(data), n)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(left: Bytes, right: Bytes, n: int) -> int:
    """Compare the first *n* bytes; return the difference at the first mismatch."""
    _check_span(len(left), n, "left operand")
    _check_span(len(right), n, "right operand")
    for a, b in zip(bytes(left[:n]), bytes(right[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)