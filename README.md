# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small set of operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom comes to the top |

The package has two commands.

## Installing

```
pip install .
```

## Producing a sequence of operations

```
push-swap 3 2 5 1 4
```

The command prints one operation per line. After the operations run, stack `a` holds
every number in ascending order from the top and stack `b` is empty. Lists of two to five
numbers are sorted with fixed strategies. Longer lists are sorted greedily: at each step
the element that needs the fewest rotations is moved.

Each argument must be an integer in the 32-bit signed range, made of ASCII digits with an
optional `+` or `-` sign. No value may appear twice. Anything else writes `Error` to
standard error and the command exits with status 1. With no arguments, or with numbers
already in strictly ascending order, it prints nothing and exits with status 1.

## Checking a sequence

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

`push-swap-checker` reads operations from standard input, one per line, and applies them
to the numbers given as arguments. It then prints:

- `OK` if stack `b` is empty and stack `a` ascends from the top;
- `KO` if not;
- `Error` on standard error if a line is not a known operation.

An operation that cannot be carried out prints `KO` and exits with status 1. Examples are
swapping a stack that holds fewer than two elements, or pushing from an empty stack.
Invalid or repeated arguments write `Error` to standard error and exit with status 1.

Some details of how input is read:

- A line longer than four characters is read as several pieces of up to four characters.
- A last line without a trailing newline is ignored.
- Reading stops at a line that starts with `E`.
- If the arguments are already in strictly ascending order and any input is given, the
  checker prints `KO` and exits with status 1.

## Using it from Python

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

operations = solve([3, 2, 5, 1, 4])

stacks = Stacks([3, 2, 5, 1, 4], strict=True)
for op in operations:
    stacks.apply(op)
assert stacks.is_sorted()
```

The modules:

- `pushswap.stacks` has `Stack`, `Stacks`, `parse_operation` and `StackError`. In strict
  mode, an operation that `Stacks` cannot carry out raises `StackError`. Otherwise that
  operation does nothing, but it is still recorded in `Stacks.operations`.
- `pushswap.parsing` checks arguments. `validate_arguments` returns the numbers to sort.
  It returns `None` when there is nothing to do. It raises `ParseError` for invalid or
  repeated values.
- `pushswap.sorting` has `solve`, `greedy_sort`, `handle_small_list`, `sort_small` and
  `move_head_to_min`.
- `pushswap.moves` has `Move`, `calc_score`, `find_best_move` and `apply_best_move`.
- `pushswap.checker` has `read_operations` and `run_checker`.