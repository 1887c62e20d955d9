"""String helpers: length, search, comparison, slicing, trimming and mapping.

Search functions return an index into the string, or None when nothing is
found. The terminating NUL of a C string is treated as a virtual character
at index ``len(s)``.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]
_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return c as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c)


def _code_at(s: str, i: int) -> int:
    """Code of s[i], or 0 past the end of the string."""
    return ord(s[i]) if i < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    found = s.find(ch)
    if found >= 0:
        return found
    if ch == _NUL:
        return len(s)
    return None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s.

    Searching for NUL finds the terminator at ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    found = s.rfind(ch)
    return None if found < 0 else found


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first
    unequal pair of codes, or 0."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    i = 0
    while i < n:
        a, b = _code_at(first, i), _code_at(second, i)
        if a != b or a == 0:
            return a - b
        i += 1
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of needle in the first length characters of haystack.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def strdup(s: str) -> str:
    """Return a copy of s."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start at or beyond the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return first followed by second."""
    return first + second


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in charset."""
    return s.strip(charset)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Apply func(index, char) to each element of chars in place.

    A returned character replaces the element; None leaves it as it is.
    Nothing happens when either argument is None.
    """
    if chars is None or func is None:
        return
    for i, ch in enumerate(chars):
        replacement = func(i, ch)
        if replacement is not None:
            chars[i] = replacement