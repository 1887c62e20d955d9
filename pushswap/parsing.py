"""Command-line number validation, parsing and ranking."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .conversions import atoi, split
from .stacks import Node

INT_MIN = -2147483648
INT_MAX = 2147483647


class InputError(ValueError):
    """Raised when the numbers given to the program are not acceptable."""


def _is_sign(c: str) -> bool:
    return c in ("-", "+")


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _looks_numeric(text: str) -> bool:
    i = 0
    if text and _is_sign(text[0]) and len(text) > 1:
        i = 1
    while i < len(text) and _is_digit(text[i]):
        i += 1
    return i == len(text)


def _is_zero(text: str) -> bool:
    i = 1 if text and _is_sign(text[0]) else 0
    if i < len(text) and text[i] == "0":
        i += 1
    return i == len(text)


def compare_numeric_strings(first: str, second: str) -> int:
    """Compare two number strings, ignoring a leading '+' on one side.

    Returns the difference of the first unequal character codes, or 0.
    """
    i = j = 0
    if first[:1] == "+" and second[:1] != "+":
        i += 1
    if second[:1] == "+":
        j += 1
    while i < len(first) and j < len(second) and first[i] == second[j]:
        i += 1
        j += 1
    a = ord(first[i]) if i < len(first) else 0
    b = ord(second[j]) if j < len(second) else 0
    return a - b


def parse_int(text: str) -> int:
    """Parse a whole string as a 32-bit signed integer.

    Leading spaces and one sign are allowed; anything else raises InputError.
    """
    i = 0
    while i < len(text) and text[i] == " ":
        i += 1
    sign = 1
    if i < len(text) and _is_sign(text[i]):
        if text[i] == "-":
            sign = -1
        i += 1
    start = i
    while i < len(text) and _is_digit(text[i]):
        i += 1
    if i == start or i != len(text):
        raise InputError(f"not an integer: {text!r}")
    number = sign * int(text[start:i])
    if not INT_MIN <= number <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return number


def is_valid_input(args: Sequence[str]) -> bool:
    """True when every argument is an in-range integer and none repeats.

    At most one argument may be a zero written as a single digit.
    """
    zeros = 0
    for arg in args:
        if not _looks_numeric(arg):
            return False
        try:
            parse_int(arg)
        except InputError:
            return False
        zeros += _is_zero(arg)
    if zeros > 1:
        return False
    for i, first in enumerate(args):
        for j, second in enumerate(args):
            if i != j and compare_numeric_strings(first, second) == 0:
                return False
    return True


def split_args(text: str) -> List[str]:
    """Split a single argument on spaces, dropping empty words."""
    return split(text, " ")


def _wrap_int32(number: int) -> int:
    return (number - INT_MIN) % (1 << 32) + INT_MIN


def build_nodes(args: Iterable[str]) -> List[Node]:
    """Build one node per argument, read as a wrapping 32-bit integer."""
    return [Node(_wrap_int32(atoi(arg))) for arg in args]


def assign_indices(nodes: Iterable[Node]) -> None:
    """Rank the nodes by value: the largest gets len - 1, the smallest keeps 0.

    Equal values are ranked in their order of appearance. A node holding
    the smallest 32-bit integer is given index 1.
    """
    items = list(nodes)
    for rank in range(len(items) - 1, 0, -1):
        best = None
        for node in items:
            if node.value == INT_MIN and node.index == 0:
                node.index = 1
            if node.index == 0 and node.value > INT_MIN and (
                best is None or node.value > best.value
            ):
                best = node
        if best is not None:
            best.index = rank