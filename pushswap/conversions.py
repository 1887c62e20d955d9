"""Number and string conversions: atoi, itoa, split and bounded copies."""

from __future__ import annotations

from typing import List, Tuple

_WHITESPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer from text.

    Leading ASCII whitespace is skipped, one optional sign is accepted and
    digits are read until the first non-digit. Text without digits gives 0.
    The value is returned exactly, without truncation to a machine integer.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < length and "0" <= text[i] <= "9":
        i += 1
    digits = text[start:i]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal representation of n."""
    return str(int(n))


def split(text: str, sep: str) -> List[str]:
    """Split text on the single character sep, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strlcpy(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the resulting buffer contents and the length of src. A size of
    zero leaves dest untouched.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters.

    Returns the resulting buffer contents and the length the full
    concatenation would have had, computed as ``min(len(dest), size)``
    plus ``len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dest_length = len(dest)
    result = dest
    if size > 0 and dest_length < size - 1:
        result = dest + src[: size - 1 - dest_length]
    return result, min(dest_length, size) + len(src)