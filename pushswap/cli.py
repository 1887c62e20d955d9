"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, Sequence

from .algorithm import sort_large, sort_three
from .parsing import InputError, assign_indices, build_nodes, is_valid_input, split_args
from .stacks import PushSwapStacks, is_sorted


def push_swap(stacks: PushSwapStacks) -> None:
    """Sort stack ``a`` with the strategy suited to its size."""
    size = len(stacks.a)
    if size == 2 and not is_sorted(stacks.a):
        stacks.sa()
    elif size == 3:
        sort_three(stacks)
    elif size > 3 and not is_sorted(stacks.a):
        sort_large(stacks)


def resolve_args(argv: Sequence[str]) -> List[str]:
    """Return the numbers to sort.

    A single argument containing spaces is split into words; if it holds
    no words at all, InputError is raised.
    """
    args = list(argv)
    if len(args) == 1 and " " in args[0]:
        words = split_args(args[0])
        if not words:
            raise InputError("no numbers given")
        return words
    return args


def solve(args: Iterable[str]) -> List[str]:
    """Return the list of operations that sorts the given numbers.

    The first number is read leniently and is left out of validation;
    every other one must be a distinct in-range integer.
    """
    numbers = list(args)
    if not is_valid_input(numbers[1:]):
        raise InputError("invalid input")
    nodes = build_nodes(numbers)
    assign_indices(nodes)
    operations: List[str] = []
    push_swap(PushSwapStacks(nodes, emit=operations.append))
    return operations


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        operations = solve(resolve_args(args))
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in operations))
    return 0


if __name__ == "__main__":
    sys.exit(main())