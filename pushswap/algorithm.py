"""The cost-based sorting strategy for the push_swap stacks."""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .parsing import INT_MAX
from .stacks import Node, PushSwapStacks, is_sorted


def sort_three(stacks: PushSwapStacks) -> None:
    """Sort a stack ``a`` of three nodes with at most two operations."""
    if is_sorted(stacks.a):
        return
    highest = max(node.index for node in stacks.a)
    if stacks.a[0].index == highest:
        stacks.ra()
    elif stacks.a[1].index == highest:
        stacks.rra()
    if stacks.a[0].index > stacks.a[1].index:
        stacks.sa()


def assign_positions(nodes: Iterable[Node]) -> None:
    """Number the nodes 0, 1, 2, ... from the top of their stack."""
    for position, node in enumerate(nodes):
        node.pos = position


def lowest_index_position(nodes: Sequence[Node]) -> int:
    """Return the position of the node with the lowest index.

    The positions of all nodes are refreshed on the way.
    """
    if not nodes:
        raise ValueError("lowest_index_position() on an empty stack")
    assign_positions(nodes)
    lowest = nodes[0]
    lowest_index = INT_MAX
    for node in nodes:
        if node.index < lowest_index:
            lowest_index = node.index
            lowest = node
    return lowest.pos


def _target_for(a: Iterable[Node], index_b: int, fallback: int) -> int:
    candidates = list(a)
    above = [node for node in candidates if index_b < node.index < INT_MAX]
    pool = above or [node for node in candidates if node.index < INT_MAX]
    if not pool:
        return fallback
    return min(pool, key=lambda node: node.index).pos


def assign_target_positions(stacks: PushSwapStacks) -> None:
    """Give every node of ``b`` the position in ``a`` it should land above.

    That is the node with the smallest index greater than its own, or, when
    there is none, the node with the smallest index of all.
    """
    assign_positions(stacks.a)
    assign_positions(stacks.b)
    target = 0
    for node in stacks.b:
        target = _target_for(stacks.a, node.index, target)
        node.target_pos = target


def _rotation_cost(position: int, size: int) -> int:
    if position > size // 2:
        return -(size - position)
    return position


def assign_costs(stacks: PushSwapStacks) -> None:
    """Set how many rotations bring each ``b`` node and its target to the top.

    Positive counts are forward rotations, negative ones reverse rotations.
    """
    size_a = len(stacks.a)
    size_b = len(stacks.b)
    for node in stacks.b:
        node.cost_b = _rotation_cost(node.pos, size_b)
        node.cost_a = _rotation_cost(node.target_pos, size_a)


def cheapest_move(stacks: PushSwapStacks) -> Tuple[int, int]:
    """Return ``(cost_a, cost_b)`` of the ``b`` node cheapest to push back.

    Ties go to the node nearest the top of ``b``.
    """
    best = None
    cheapest = INT_MAX
    for node in stacks.b:
        total = abs(node.cost_a) + abs(node.cost_b)
        if total < cheapest:
            cheapest = total
            best = node
    if best is None:
        raise ValueError("cheapest_move() with an empty stack b")
    return best.cost_a, best.cost_b


def perform_move(stacks: PushSwapStacks, cost_a: int, cost_b: int) -> None:
    """Rotate both stacks by the given costs, then push the top of ``b`` onto ``a``."""
    if cost_a < 0 and cost_b < 0:
        while cost_a < 0 and cost_b < 0:
            cost_a += 1
            cost_b += 1
            stacks.rrr()
    elif cost_a > 0 and cost_b > 0:
        while cost_a > 0 and cost_b > 0:
            cost_a -= 1
            cost_b -= 1
            stacks.rr()
    while cost_a > 0:
        stacks.ra()
        cost_a -= 1
    while cost_a < 0:
        stacks.rra()
        cost_a += 1
    while cost_b > 0:
        stacks.rb()
        cost_b -= 1
    while cost_b < 0:
        stacks.rrb()
        cost_b += 1
    stacks.pa()


def _push_all_but_three(stacks: PushSwapStacks) -> None:
    size = len(stacks.a)
    moved = 0
    if size > 6:
        for _ in range(size):
            if moved >= size // 2:
                break
            if stacks.a[0].index <= size // 2:
                stacks.pb()
                moved += 1
            else:
                stacks.rra()
    while size - moved > 3:
        stacks.pb()
        moved += 1


def _shift_lowest_to_top(stacks: PushSwapStacks) -> None:
    size = len(stacks.a)
    lowest = lowest_index_position(stacks.a)
    if lowest > size // 2:
        for _ in range(size - lowest):
            stacks.rra()
    else:
        for _ in range(lowest):
            stacks.ra()


def sort_large(stacks: PushSwapStacks) -> None:
    """Sort a stack ``a`` of more than three nodes."""
    _push_all_but_three(stacks)
    sort_three(stacks)
    while stacks.b:
        assign_target_positions(stacks)
        assign_costs(stacks)
        cost_a, cost_b = cheapest_move(stacks)
        perform_move(stacks, cost_a, cost_b)
    if not is_sorted(stacks.a):
        _shift_lowest_to_top(stacks)