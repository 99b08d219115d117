"""Choosing and carrying out the cheapest move of one element between stacks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from pushswap.stacks import Stack, StackError, Stacks


@dataclass(frozen=True)
class Move:
    """Rotations needed on the source and target stacks, and their cost.

    A positive count means that many forward rotations, a negative one that
    many reverse rotations.
    """

    source: int
    target: int
    score: int


def _nearest(index: int, size: int) -> int:
    return index if index < abs(index - size) else index - size


def calc_score(i: int, j: int, from_size: int, dist_size: int) -> Move:
    """Cost of bringing position ``i`` and position ``j`` to their tops.

    Each stack is turned the shorter way round; turns in the same direction
    on both stacks are shared.
    """
    source = _nearest(i, from_size)
    target = _nearest(j, dist_size)
    score = min(
        min(abs(source), abs(target)) + abs(source - target),
        abs(source) + abs(target),
    )
    return Move(source, target, score)


def _fits_ascending(node: int, prev: int, cur: int) -> bool:
    if prev < node and (node < cur or cur < prev):
        return True
    return node < cur < prev


def _fits_descending(node: int, prev: int, cur: int) -> bool:
    if node < prev and (cur < node or prev < cur):
        return True
    return cur < node and prev < cur


def find_best_move(source: Stack, target: Stack, descending: bool = False) -> Move:
    """Find the cheapest element of ``source`` to insert into ``target``.

    ``target`` is kept in circular ascending order, or circular descending
    order when ``descending`` is true. Among moves of equal cost the first
    one found wins. Raises :class:`StackError` if no move exists.
    """
    fits: Callable[[int, int, int], bool] = (
        _fits_descending if descending else _fits_ascending
    )
    source_values = list(source)
    target_values = list(target)
    best: Move | None = None
    for i, node in enumerate(source_values):
        for j, cur in enumerate(target_values):
            move = calc_score(i, j, len(source_values), len(target_values))
            if (best is None or move.score < best.score) and fits(
                node, target_values[j - 1], cur
            ):
                best = move
    if best is None:
        raise StackError("no move available between these stacks")
    return best


def apply_best_move(stacks: Stacks, move: Move, side: str) -> None:
    """Rotate both stacks as ``move`` says, then push from ``side`` to the other."""
    if side not in ("a", "b"):
        raise StackError(f"invalid side: {side!r}")
    other = "b" if side == "a" else "a"
    source, target = move.source, move.target
    while source > 0 and target > 0:
        stacks.rotate("r")
        source -= 1
        target -= 1
    while source < 0 and target < 0:
        stacks.rotate("r", reverse=True)
        source += 1
        target += 1
    for _ in range(abs(source)):
        stacks.rotate(side, reverse=source < 0)
    for _ in range(abs(target)):
        stacks.rotate(other, reverse=target < 0)
    stacks.push(other)