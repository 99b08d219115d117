"""The two circular stacks and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

_SWAP_SIDES = {"a": ("a",), "b": ("b",), "s": ("a", "b")}
_ROTATE_SIDES = {"a": ("a",), "b": ("b",), "r": ("a", "b")}
_PUSH_MODES = ("a", "b")

_OPERATIONS = {
    "sa": ("s", "a", False),
    "sb": ("s", "b", False),
    "ss": ("s", "s", False),
    "pa": ("p", "a", False),
    "pb": ("p", "b", False),
    "ra": ("r", "a", False),
    "rb": ("r", "b", False),
    "rr": ("r", "r", False),
    "rra": ("r", "a", True),
    "rrb": ("r", "b", True),
    "rrr": ("r", "r", True),
}


class StackError(ValueError):
    """Raised when an operation cannot be carried out on the stacks."""


class Stack:
    """A circular stack of integers; iteration starts at the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> int:
        """Return the value at the top without removing it."""
        if not self._items:
            raise StackError("stack is empty")
        return self._items[0]

    def rotate(self, reverse: bool = False) -> None:
        """Move the top to the bottom, or the bottom to the top if reversed."""
        if not self._items:
            raise StackError("cannot rotate an empty stack")
        self._items.rotate(1 if reverse else -1)

    def swap(self) -> None:
        """Exchange the two topmost values."""
        if len(self._items) < 2:
            raise StackError("swap needs at least two elements")
        items = self._items
        items[0], items[1] = items[1], items[0]

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackError("cannot pop from an empty stack")
        return self._items.popleft()

    def push(self, value: int) -> None:
        """Place a value on top."""
        self._items.appendleft(value)


def parse_operation(text: str) -> tuple[str, str, bool]:
    """Split an operation name into its kind, mode and reverse flag.

    The name must match exactly, e.g. ``"rra"`` gives ``("r", "a", True)``.
    """
    try:
        return _OPERATIONS[text]
    except KeyError:
        raise StackError(f"unknown operation: {text!r}") from None


class Stacks:
    """Stacks ``a`` and ``b`` with the named operations.

    Every operation carried out is appended to ``operations``. In strict
    mode an operation that cannot act (an empty stack, a swap with fewer
    than two elements) raises :class:`StackError`; otherwise it is a no-op
    that is still recorded.
    """

    def __init__(self, values: Iterable[int] = (), strict: bool = False) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.strict = strict
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _stack(self, side: str) -> Stack:
        return self.a if side == "a" else self.b

    @staticmethod
    def _sides(table: dict[str, tuple[str, ...]], mode: str, name: str) -> tuple[str, ...]:
        try:
            return table[mode]
        except KeyError:
            raise StackError(f"invalid {name} mode: {mode!r}") from None

    def swap(self, mode: str) -> None:
        """Swap the top two of ``a``, ``b`` or both (mode ``"s"``)."""
        stacks = [self._stack(side) for side in self._sides(_SWAP_SIDES, mode, "swap")]
        if self.strict and any(len(stack) < 2 for stack in stacks):
            raise StackError(f"cannot s{mode}")
        for stack in stacks:
            if len(stack) >= 2:
                stack.swap()
        self.operations.append(f"s{mode}")

    def push(self, mode: str) -> None:
        """Move the top of the other stack onto stack ``mode``."""
        if mode not in _PUSH_MODES:
            raise StackError(f"invalid push mode: {mode!r}")
        target = self._stack(mode)
        source = self.b if mode == "a" else self.a
        if len(source):
            target.push(source.pop())
        elif self.strict:
            raise StackError(f"cannot p{mode}")
        self.operations.append(f"p{mode}")

    def rotate(self, mode: str, reverse: bool = False) -> None:
        """Rotate ``a``, ``b`` or both (mode ``"r"``), reversed if asked."""
        stacks = [
            self._stack(side) for side in self._sides(_ROTATE_SIDES, mode, "rotate")
        ]
        prefix = "rr" if reverse else "r"
        if self.strict and any(len(stack) == 0 for stack in stacks):
            raise StackError(f"cannot {prefix}{mode}")
        for stack in stacks:
            if len(stack):
                stack.rotate(reverse)
        self.operations.append(f"{prefix}{mode}")

    def apply(self, operation: str) -> None:
        """Carry out an operation given by name, such as ``"pb"``."""
        kind, mode, reverse = parse_operation(operation)
        if kind == "s":
            self.swap(mode)
        elif kind == "p":
            self.push(mode)
        else:
            self.rotate(mode, reverse)

    def is_sorted(self) -> bool:
        """True when ``b`` is empty and ``a`` ascends from top to bottom."""
        if len(self.b):
            return False
        values = list(self.a)
        return all(low <= high for low, high in zip(values, values[1:]))