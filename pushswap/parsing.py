"""Reading and checking the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_INT_MAX_DIGITS = "2147483647"
_INT_MIN_DIGITS = "2147483648"
_LONG_LIMIT = 2**63
_DIGITS = frozenset("0123456789")
_SPACES = frozenset("\t\n\v\f\r ")


class ParseError(ValueError):
    """Raised when the arguments are not a valid list of distinct integers."""


def _to_int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` the way C's ``atoi`` does.

    Leading whitespace and one sign are accepted, conversion stops at the
    first non-digit, and the result is wrapped to a 32-bit signed integer.
    A value that overflows a 64-bit long gives what the clamped long
    truncates to: ``-1`` for a positive overflow, ``0`` for a negative one.
    """
    position = 0
    while position < len(text) and text[position] in _SPACES:
        position += 1
    negative = False
    if position < len(text) and text[position] in "+-":
        negative = text[position] == "-"
        position += 1
    limit = _LONG_LIMIT if negative else _LONG_LIMIT - 1
    number = 0
    for char in text[position:]:
        if char not in _DIGITS:
            break
        candidate = number * 10 + int(char)
        if candidate >= limit:
            return 0 if negative else -1
        number = candidate
    return _to_int32(-number if negative else number)


def _overflows(text: str) -> bool:
    negative = text.startswith("-")
    digits = text[1:] if text[:1] in ("+", "-") else text
    if len(digits) < 10:
        return False
    if len(digits) > 10:
        return True
    boundary = _INT_MIN_DIGITS if negative else _INT_MAX_DIGITS
    return digits > boundary


def is_valid_number(text: str) -> bool:
    """True if ``text`` is an optionally signed decimal that fits in 32 bits.

    Only ASCII digits are accepted, with at most ten of them after the sign.
    """
    if not text or _overflows(text):
        return False
    digits = text[1:] if text[0] in "+-" else text
    return bool(digits) and all(char in _DIGITS for char in digits)


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Convert every argument to an integer, raising on the first bad one."""
    numbers = []
    for arg in args:
        if not is_valid_number(arg):
            raise ParseError(f"invalid integer: {arg!r}")
        numbers.append(atoi(arg))
    return numbers


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """True if any value occurs more than once."""
    ordered = merge_sort(values)
    return any(low == high for low, high in zip(ordered, ordered[1:]))


def is_strictly_sorted(values: Sequence[int]) -> bool:
    """True if every value is greater than the one before it."""
    return all(low < high for low, high in zip(values, values[1:]))


def validate_arguments(args: Sequence[str]) -> list[int] | None:
    """Parse the arguments into the numbers to sort.

    Returns ``None`` when there is nothing to do: no arguments, or numbers
    that are already in strictly ascending order. Raises :class:`ParseError`
    for a malformed or out-of-range argument or for a repeated value.
    """
    if not args:
        return None
    numbers = parse_numbers(args)
    if has_duplicates(numbers):
        raise ParseError("duplicate values")
    if is_strictly_sorted(numbers):
        return None
    return numbers