"""Command that prints the operations sorting the given integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import ParseError, validate_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; return the exit status.

    Exits with 1 and prints nothing when there is nothing to sort, and with
    1 after writing ``Error`` to standard error for invalid input.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = validate_arguments(args)
    except ParseError:
        sys.stderr.write("Error\n")
        return 1
    if numbers is None:
        return 1
    for operation in solve(numbers):
        sys.stdout.write(operation + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())