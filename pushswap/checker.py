"""Command that checks whether a list of operations sorts the given integers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from typing import TextIO

from pushswap.parsing import (
    ParseError,
    has_duplicates,
    is_strictly_sorted,
    parse_numbers,
)
from pushswap.stacks import StackError, Stacks, parse_operation

_MAX_OPERATION_LENGTH = 4
_END_MARKER = "E"


class _UnknownOperation(StackError):
    """An input line that names no operation."""


def read_operations(stream: TextIO) -> Iterator[str]:
    """Yield the operations read from ``stream``, one per line.

    A line is cut into pieces of at most four characters. Reading stops at
    the end of the stream, dropping a last line that has no newline, or at
    a piece that begins with ``E``.
    """
    while True:
        chars: list[str] = []
        while len(chars) < _MAX_OPERATION_LENGTH:
            char = stream.read(1)
            if not char:
                return
            if char == "\n":
                break
            chars.append(char)
        line = "".join(chars)
        if line.startswith(_END_MARKER):
            return
        yield line


def run_checker(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Apply ``lines`` to stacks holding ``values``; True if the result is sorted.

    Raises :class:`StackError` for an unknown operation or for one that
    cannot act on the stacks as they are.
    """
    stacks = Stacks(values, strict=True)
    for line in lines:
        stacks.apply(line)
    return stacks.is_sorted()


def _checked(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        try:
            parse_operation(line)
        except StackError as error:
            raise _UnknownOperation(str(error)) from None
        yield line


def main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print ``OK`` or ``KO``.

    Invalid arguments, an unknown operation or a repeated value write
    ``Error`` to standard error. An operation that cannot be carried out
    prints ``KO`` and exits with 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        numbers = parse_numbers(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if has_duplicates(numbers):
        sys.stderr.write("Error\n")
        return 1
    if is_strictly_sorted(numbers) and sys.stdin.read(1):
        sys.stdout.write("KO\n")
        return 1
    try:
        ok = run_checker(numbers, _checked(read_operations(sys.stdin)))
    except _UnknownOperation:
        sys.stderr.write("Error\n")
        return 0
    except StackError:
        sys.stdout.write("KO\n")
        return 1
    sys.stdout.write("OK\n" if ok else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())