"""Sorting strategies that produce the list of operations."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.moves import apply_best_move, find_best_move
from pushswap.stacks import StackError, Stacks


def sort_small(stacks: Stacks, side: str) -> None:
    """Order a stack of two or three values with at most one swap.

    Side ``a`` is left in circular ascending order, side ``b`` in circular
    descending order; a two-value stack is put in ascending order.
    """
    stack = stacks.a if side == "a" else stacks.b
    values = list(stack)
    if len(values) == 2 and values[1] < values[0]:
        stacks.swap(side)
    elif len(values) == 3:
        rises = sum(
            current < following
            for current, following in zip(values, values[1:] + values[:1])
        )
        if side == "a" and rises != 2:
            stacks.swap(side)
        elif side == "b" and rises != 1:
            stacks.swap(side)


def move_head_to_min(stacks: Stacks) -> None:
    """Rotate stack ``a`` the shorter way until its smallest value is on top."""
    values = list(stacks.a)
    if not values:
        raise StackError("stack a is empty")
    min_point = values.index(min(values))
    size = len(values)
    if min_point < size - min_point:
        for _ in range(min_point):
            stacks.rotate("a")
    else:
        for _ in range(size - min_point):
            stacks.rotate("a", reverse=True)


def _insert_back(stacks: Stacks) -> None:
    while len(stacks.b):
        apply_best_move(stacks, find_best_move(stacks.b, stacks.a), "b")


def handle_small_list(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds two to five values."""
    size = len(stacks.a)
    if size == 2:
        stacks.swap("a")
    elif size == 3:
        sort_small(stacks, "a")
        move_head_to_min(stacks)
    elif size == 4:
        for _ in range(3):
            stacks.push("b")
        sort_small(stacks, "b")
        stacks.push("a")
        _insert_back(stacks)
        move_head_to_min(stacks)
    elif size == 5:
        stacks.push("b")
        stacks.push("b")
        sort_small(stacks, "a")
        _insert_back(stacks)
        move_head_to_min(stacks)


def greedy_sort(stacks: Stacks) -> None:
    """Sort stack ``a`` by moving the cheapest element at each step."""
    for _ in range(3):
        stacks.push("b")
    sort_small(stacks, "b")
    while len(stacks.a) > 3:
        apply_best_move(stacks, find_best_move(stacks.a, stacks.b, True), "a")
    sort_small(stacks, "a")
    _insert_back(stacks)
    move_head_to_min(stacks)


def solve(values: Iterable[int]) -> list[str]:
    """Return the operations that sort ``values`` onto stack ``a``."""
    stacks = Stacks(values)
    if len(stacks.a) < 6:
        handle_small_list(stacks)
    else:
        greedy_sort(stacks)
    return stacks.operations