"""Byte-buffer helpers: fill, allocate, search, compare and copy."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
Readable = Union[bytes, bytearray, memoryview]


def _check_span(n: int, *buffers: Readable) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def memset(buffer: Buffer, c: int, n: int) -> Buffer:
    """Fill the first n bytes of buffer with the low byte of c."""
    _check_span(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count * size bytes."""
    total = count * size
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(total)


def memchr(data: Readable, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to c within n bytes, or None."""
    _check_span(n, data)
    found = bytes(data[:n]).find(c & 0xFF)
    return None if found < 0 else found


def memcmp(first: Readable, second: Readable, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_span(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy n bytes from src into dest and return dest."""
    if n == 0 or dest is src:
        return dest
    _check_span(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(dest: Buffer, src: Readable, n: int) -> Buffer:
    """Copy n bytes from src into dest, correct even when they overlap."""
    if n == 0 or dest is src:
        return dest
    _check_span(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest