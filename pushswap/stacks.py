"""The two push_swap stacks and the eleven operations defined on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterable, Optional


@dataclass
class Node:
    """One number on a stack, with the bookkeeping the sorter attaches to it."""

    value: int
    index: int = 0
    pos: int = -1
    target_pos: int = -1
    cost_a: int = -1
    cost_b: int = -1


def is_sorted(nodes: Iterable[Node]) -> bool:
    """True when the values never decrease from top to bottom."""
    previous: Optional[int] = None
    for node in nodes:
        if previous is not None and previous > node.value:
            return False
        previous = node.value
    return True


def _print_operation(name: str) -> None:
    print(name)


class PushSwapStacks:
    """Stacks ``a`` and ``b``; every operation reports its name to ``emit``.

    The top of a stack is the left end of its deque.
    """

    def __init__(
        self,
        nodes: Iterable[Node] = (),
        emit: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.a: Deque[Node] = deque(nodes)
        self.b: Deque[Node] = deque()
        self._emit = emit if emit is not None else _print_operation

    @staticmethod
    def _swap(stack: Deque[Node]) -> None:
        # Only the numbers move; the nodes keep their other fields.
        if len(stack) < 2:
            return
        first, second = stack[0], stack[1]
        first.value, second.value = second.value, first.value
        first.index, second.index = second.index, first.index

    @staticmethod
    def _push(src: Deque[Node], dest: Deque[Node]) -> None:
        if src:
            dest.appendleft(src.popleft())

    @staticmethod
    def _rotate(stack: Deque[Node]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: Deque[Node]) -> None:
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self.b)
        self._swap(self.a)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self._push(self.b, self.a)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self._push(self.a, self.b)
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rrr")